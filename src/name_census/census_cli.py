#!/usr/bin/env python3
"""
Name Census CLI - Command Line Interface
Counts, ranks and pairs the names in a people record file with rich terminal output.
"""

import argparse
import codecs
import logging
import time
from typing import Iterable, Iterator, List, Optional

from name_census.config import (
    APP_NAME, APP_VERSION, APP_DESCRIPTION, DEFAULT_TOP_COUNT, DEFAULT_SELECTION_LIMIT,
    DEFAULT_ENCODING, OUTPUT_FORMATS, PROGRESS_UPDATE_INTERVAL, ERROR_MESSAGES, SUCCESS_MESSAGES
)
from name_census.core.models import NameCount, Report
from name_census.generator import write_sample_file
from name_census.operations.census_builder import CensusBuilder
from name_census.operations.results_handler import ResultsHandler
from name_census.utils import iter_lines, format_duration, truncate_string
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

DEFAULT_SAMPLE_FILE = "test-data.txt"

console = Console()
logger = logging.getLogger(__name__)


class ConsoleUI:
    """Rich-based console UI for the CLI."""

    @staticmethod
    def print_banner():
        console.print(Panel.fit(f"[bold cyan]{APP_NAME}[/] CLI v{APP_VERSION}\n[dim]{APP_DESCRIPTION}[/]", border_style="cyan"))

    @staticmethod
    def print_unique_counts(report: Report):
        table = Table(title="Unique Names", box=box.SIMPLE_HEAD, expand=False)
        table.add_column("Kind", style="bold")
        table.add_column("Unique", justify="right")
        table.add_row("First", f"{report.unique_first_count:,}")
        table.add_row("Last", f"{report.unique_last_count:,}")
        table.add_row("Full", f"{report.unique_full_count:,}")
        console.print(table)

    @staticmethod
    def print_ranked(title: str, entries: Iterable[NameCount]):
        table = Table(title=title, box=box.SIMPLE_HEAD)
        table.add_column("#", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Count", justify="right")
        for i, entry in enumerate(entries, 1):
            table.add_row(str(i), truncate_string(entry.name), f"{entry.count:,}")
        console.print(table)

    @staticmethod
    def print_pairs(report: Report):
        table = Table(title=f"Distinct Names ({len(report.selected_pairs)})", box=box.SIMPLE_HEAD)
        table.add_column("#", justify="right")
        table.add_column("Last", style="cyan")
        table.add_column("First", style="cyan")
        for i, pair in enumerate(report.selected_pairs, 1):
            table.add_row(str(i), truncate_string(pair.last), truncate_string(pair.first))
        console.print(table)

    @staticmethod
    def print_summary(report: Report, elapsed: float):
        skipped = report.total_lines - report.total_records
        console.print(Panel.fit(
            f"Lines: [bold]{report.total_lines:,}[/] | Records: [bold green]{report.total_records:,}[/] | "
            f"Skipped: [bold]{skipped:,}[/] | Elapsed: [bold]{format_duration(elapsed)}[/]",
            title="Summary",
            border_style="green",
        ))

    @classmethod
    def print_report(cls, report: Report, elapsed: float):
        cls.print_summary(report, elapsed)
        cls.print_unique_counts(report)
        cls.print_ranked("Top First Names", report.top_first)
        cls.print_ranked("Top Last Names", report.top_last)
        cls.print_pairs(report)


def _with_progress(lines: Iterable[str], progress: Progress, task) -> Iterator[str]:
    """Pass lines through while advancing the progress task every few thousand lines."""
    pending = 0
    for line in lines:
        yield line
        pending += 1
        if pending >= PROGRESS_UPDATE_INTERVAL:
            progress.update(task, advance=pending)
            pending = 0
    progress.update(task, advance=pending)


def run_census(path: str, top_count: int, selection_limit: int, encoding: str = DEFAULT_ENCODING) -> Report:
    """Stream `path` through a CensusBuilder, showing a spinner on terminals."""
    builder = CensusBuilder(top_count=top_count, selection_limit=selection_limit)
    with Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        TextColumn("{task.completed:,.0f} lines"),
        TimeElapsedColumn(),
        transient=True,
        console=console,
        disable=not console.is_terminal,
    ) as progress:
        task = progress.add_task(f"Reading {path}", total=None)
        builder.consume(_with_progress(iter_lines(path, encoding), progress, task))
    return builder.build_report()


def setup_logging(verbose: bool = False):
    """Setup logging configuration.
    Default to WARNING to keep the report readable. Use --verbose for DEBUG.
    Route logs through Rich so the progress spinner isn't broken.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=verbose,
        rich_tracebacks=verbose,
        markup=False,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def validate_args(args) -> bool:
    """Validate command line arguments."""
    if args.top < 0:
        console.print(ERROR_MESSAGES['negative_top'])
        return False
    
    if args.limit < 0:
        console.print(ERROR_MESSAGES['negative_limit'])
        return False
    
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        console.print(ERROR_MESSAGES['unknown_encoding'].format(encoding=args.encoding))
        return False
    
    if args.generate_sample is not None and args.generate_sample <= 0:
        console.print(ERROR_MESSAGES['invalid_sample_count'])
        return False
    
    if not args.input and args.generate_sample is None:
        console.print(ERROR_MESSAGES['missing_input'])
        return False
    
    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    
    # Setup logging
    setup_logging(args.verbose)
    
    if not validate_args(args):
        return 1
    
    if not args.no_banner:
        ConsoleUI.print_banner()
    
    try:
        # Sample generation, then census of the generated file unless an input was given
        if args.generate_sample is not None:
            try:
                count = write_sample_file(args.sample_output, args.generate_sample, seed=args.seed, encoding=args.encoding)
            except OSError as e:
                console.print(ERROR_MESSAGES['sample_write_failed'].format(file=args.sample_output, error=escape(str(e))))
                return 1
            console.print(SUCCESS_MESSAGES['sample_written'].format(count=count, file=args.sample_output))
            if not args.input:
                args.input = args.sample_output
        
        start_time = time.time()
        report = run_census(args.input, args.top, args.limit, args.encoding)
        elapsed = time.time() - start_time
        
        ConsoleUI.print_report(report, elapsed)
        logger.info(
            SUCCESS_MESSAGES['census_complete'].format(records=report.total_records, lines=report.total_lines)
        )
        
        if args.output:
            written = ResultsHandler().save_report(
                report, args.output, output_format=args.format, overwrite=args.overwrite
            )
            if not written:
                console.print(f"[red]Failed to save report to {args.output}[/]")
                return 1
            console.print(SUCCESS_MESSAGES['report_saved'].format(file=written))
        
        return 0
        
    except FileNotFoundError:
        console.print(ERROR_MESSAGES['input_not_found'].format(file=args.input))
        return 1
    except PermissionError:
        console.print(ERROR_MESSAGES['input_permission'].format(file=args.input))
        return 1
    except KeyboardInterrupt:
        console.print(f"\n{ERROR_MESSAGES['interrupted']}")
        return 130
    except Exception as e:
        console.print(f"❌ Unexpected error: {e}")
        if args.verbose:
            console.print_exception()
        return 1


def create_argument_parser():
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="name-census",
        description=f"{APP_NAME} CLI - {APP_DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic usage
  %(prog)s people.txt
  
  # Read from stdin
  cat people.txt | %(prog)s -
  
  # Show the top 20 names and select up to 50 distinct names
  %(prog)s people.txt --top 20 --limit 50
  
  # Save the report (format inferred by extension)
  %(prog)s people.txt --output report.csv
  
  # Generate a 100000 record sample file and analyze it
  %(prog)s --generate-sample 100000 --seed 7
        """
    )
    
    parser.add_argument("input", nargs='?', help="People record file to analyze ('-' for stdin)")
    parser.add_argument("--top", "-t", type=int, default=DEFAULT_TOP_COUNT, help=f"Number of most common names to show (default: {DEFAULT_TOP_COUNT})")
    parser.add_argument("--limit", "-l", type=int, default=DEFAULT_SELECTION_LIMIT, help=f"Maximum number of distinct names to select (default: {DEFAULT_SELECTION_LIMIT})")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help=f"Input file encoding (default: {DEFAULT_ENCODING})")
    parser.add_argument("--output", "-o", help="Save the report to a JSON/CSV/TXT file (inferred by extension)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format, overrides the extension")
    parser.add_argument("--overwrite", action="store_true", help="Overwrite an existing output file instead of saving under a new name")
    parser.add_argument("--generate-sample", type=int, metavar="N", help="Generate a sample file with N records before analyzing")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --generate-sample")
    parser.add_argument("--sample-output", default=DEFAULT_SAMPLE_FILE, help=f"Where to write the generated sample (default: {DEFAULT_SAMPLE_FILE})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--no-banner", action="store_true", help="Don't show application banner")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} CLI v{APP_VERSION}")
    
    return parser


if __name__ == "__main__":
    raise SystemExit(main())
