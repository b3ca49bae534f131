import unittest

from name_census.core.models import NamePair, Record
from name_census.core.selector import DistinctPairSelector
from name_census.core.parser import parse_lines
from name_census.generator import generate_sample_lines


def rec(last, first):
    return Record(first=first, last=last, full=f"{last}, {first}")


class TestDistinctPairSelector(unittest.TestCase):
    def assert_invariant(self, selector):
        self.assertEqual(len(selector.firsts), len(selector.lasts))
        self.assertEqual(len(selector.firsts), len(selector.pairs))
        self.assertLessEqual(len(selector.pairs), selector.limit)
        self.assertEqual({p.first for p in selector.pairs}, selector.firsts)
        self.assertEqual({p.last for p in selector.pairs}, selector.lasts)

    def test_admits_in_arrival_order(self):
        selector = DistinctPairSelector()
        self.assertTrue(selector.admit(rec("Graham", "Mckenna")))
        self.assertTrue(selector.admit(rec("Marvin", "Garfield")))
        self.assertEqual(selector.pairs, (NamePair("Mckenna", "Graham"), NamePair("Garfield", "Marvin")))

    def test_rejects_repeated_first_or_last(self):
        selector = DistinctPairSelector()
        selector.admit(rec("Graham", "Mckenna"))
        self.assertFalse(selector.admit(rec("Graham", "Mckenna")))
        self.assertFalse(selector.admit(rec("Graham", "Lola")))
        self.assertFalse(selector.admit(rec("Marvin", "Mckenna")))
        self.assertEqual(len(selector), 1)
        self.assert_invariant(selector)

    def test_bound_is_enforced(self):
        selector = DistinctPairSelector()
        admitted = [selector.admit(rec(f"Last{i}", f"First{i}")) for i in range(30)]
        self.assertEqual(admitted, [True] * 25 + [False] * 5)
        self.assertTrue(selector.is_full)
        self.assertEqual(selector.pairs[-1], NamePair("First24", "Last24"))
        self.assert_invariant(selector)

    def test_custom_and_zero_limit(self):
        selector = DistinctPairSelector(limit=2)
        for i in range(5):
            selector.admit(rec(f"L{i}", f"F{i}"))
        self.assertEqual(len(selector), 2)

        empty = DistinctPairSelector(limit=0)
        self.assertFalse(empty.admit(rec("Graham", "Mckenna")))
        self.assertEqual(empty.pairs, ())

    def test_negative_limit_rejected(self):
        with self.assertRaises(ValueError):
            DistinctPairSelector(limit=-1)

    def test_first_fit_not_maximum(self):
        # A maximum matching would take (A,y) and (B,x); first-fit takes (A,x) only.
        selector = DistinctPairSelector()
        for record in [rec("x", "A"), rec("y", "A"), rec("x", "B")]:
            selector.admit(record)
        self.assertEqual(selector.pairs, (NamePair("A", "x"),))

    def test_invariant_holds_after_every_prefix(self):
        selector = DistinctPairSelector()
        for record in parse_lines(generate_sample_lines(300, seed=11)):
            selector.admit(record)
            self.assert_invariant(selector)

    def test_deterministic(self):
        lines = list(generate_sample_lines(300, seed=5))
        runs = []
        for _ in range(2):
            selector = DistinctPairSelector()
            for record in parse_lines(lines):
                selector.admit(record)
            runs.append(selector.pairs)
        self.assertEqual(runs[0], runs[1])


if __name__ == '__main__':
    unittest.main()
