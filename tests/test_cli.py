import io
import json
import os
import tempfile
import unittest
from unittest.mock import patch

from rich.console import Console

from name_census import census_cli


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.out = io.StringIO()
        patcher = patch.object(census_cli, "console", Console(file=self.out, width=200))
        patcher.start()
        self.addCleanup(patcher.stop)

    def write_input(self, text):
        path = os.path.join(self.tmp.name, "people.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_report_rendering(self):
        path = self.write_input(
            "Graham, Mckenna -- ut\n    Voluptatem ipsam et at.\n"
            "Marvin, Garfield -- non\n    Facere et necessitatibus animi.\n"
        )
        self.assertEqual(census_cli.main([path, "--no-banner"]), 0)
        output = self.out.getvalue()
        self.assertIn("Top First Names", output)
        self.assertIn("Mckenna", output)
        self.assertIn("Distinct Names (2)", output)

    def test_output_file(self):
        path = self.write_input("Graham, Mckenna -- ut\n")
        report_path = os.path.join(self.tmp.name, "report.json")
        self.assertEqual(census_cli.main([path, "--no-banner", "-o", report_path]), 0)
        with open(report_path, encoding="utf-8") as f:
            self.assertEqual(json.load(f)["unique_full_count"], 1)

    def test_stdin_input(self):
        with patch("sys.stdin", io.TextIOWrapper(io.BytesIO(b"Lang, Agustina -- pariatur\n"))):
            self.assertEqual(census_cli.main(["-", "--no-banner"]), 0)
        self.assertIn("Agustina", self.out.getvalue())

    def test_undecodable_bytes_are_skipped(self):
        path = os.path.join(self.tmp.name, "people.txt")
        with open(path, "wb") as f:
            f.write(b"Graham, Mckenna -- ut\n    Caf\xe9 bad byte.\nMarvin, Garfield -- non\n")
        report_path = os.path.join(self.tmp.name, "report.json")
        self.assertEqual(census_cli.main([path, "--no-banner", "-o", report_path]), 0)
        with open(report_path, encoding="utf-8") as f:
            data = json.load(f)
        self.assertEqual(data["total_lines"], 3)
        self.assertEqual(data["total_records"], 2)
        self.assertEqual(data["unique_full_count"], 2)

    def test_unknown_encoding(self):
        path = self.write_input("Graham, Mckenna -- ut\n")
        self.assertEqual(census_cli.main([path, "--no-banner", "--encoding", "no-such-codec"]), 1)
        self.assertIn("Unknown encoding: no-such-codec", self.out.getvalue())

    def test_sample_write_failure_names_sample_file(self):
        blocker = self.write_input("")
        sample = os.path.join(blocker, "sample.txt")
        code = census_cli.main(["--generate-sample", "5", "--sample-output", sample, "--no-banner"])
        self.assertEqual(code, 1)
        output = self.out.getvalue()
        self.assertIn("Could not write sample file", output)
        self.assertIn("sample.txt", output)
        self.assertNotIn("None", output)

    def test_missing_file(self):
        missing = os.path.join(self.tmp.name, "missing.txt")
        self.assertEqual(census_cli.main([missing, "--no-banner"]), 1)
        self.assertIn("Input file not found", self.out.getvalue())

    def test_invalid_arguments(self):
        path = self.write_input("")
        self.assertEqual(census_cli.main([path, "--top", "-1"]), 1)
        self.assertEqual(census_cli.main([path, "--limit", "-5"]), 1)
        self.assertEqual(census_cli.main(["--generate-sample", "0"]), 1)
        self.assertEqual(census_cli.main([]), 1)

    def test_generate_sample_and_analyze(self):
        sample = os.path.join(self.tmp.name, "sample.txt")
        code = census_cli.main(["--generate-sample", "200", "--seed", "4", "--sample-output", sample, "--no-banner"])
        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(sample))
        self.assertIn("Distinct Names", self.out.getvalue())

    def test_empty_input(self):
        path = self.write_input("")
        self.assertEqual(census_cli.main([path, "--no-banner"]), 0)
        self.assertIn("Distinct Names (0)", self.out.getvalue())

    def test_run_census(self):
        path = self.write_input("Graham, Mckenna -- ut\n    x\nGraham, Lola -- y\n")
        report = census_cli.run_census(path, top_count=10, selection_limit=25)
        self.assertEqual(report.total_lines, 3)
        self.assertEqual(report.unique_last_count, 1)
        self.assertEqual(len(report.selected_pairs), 1)


if __name__ == '__main__':
    unittest.main()
