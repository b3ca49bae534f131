#!/usr/bin/env python3
"""
Census Builder Module
Folds a stream of lines through the parser, the accumulator and the selector,
then assembles the final Report.
"""

import logging
from typing import Iterable, Optional

from name_census.config import DEFAULT_SELECTION_LIMIT, DEFAULT_TOP_COUNT
from name_census.core.accumulator import NameTables
from name_census.core.models import Record, Report
from name_census.core.parser import parse_line
from name_census.core.ranker import rank, top
from name_census.core.selector import DistinctPairSelector

logger = logging.getLogger(__name__)


class CensusBuilder:
    """Single-pass accumulator over input lines. Pure: no printing/UI."""

    def __init__(self, top_count: int = DEFAULT_TOP_COUNT, selection_limit: int = DEFAULT_SELECTION_LIMIT):
        self.top_count = top_count
        self.tables = NameTables()
        self.selector = DistinctPairSelector(selection_limit)
        self.lines_seen = 0

    def consume_record(self, record: Record) -> None:
        """Count the record and offer it to the selector, in that order."""
        self.tables.observe(record)
        self.selector.admit(record)

    def consume_line(self, line: str) -> Optional[Record]:
        self.lines_seen += 1
        record = parse_line(line)
        if record is not None:
            self.consume_record(record)
        return record

    def consume(self, lines: Iterable[str]) -> 'CensusBuilder':
        for line in lines:
            self.consume_line(line)
        return self

    def build_report(self) -> Report:
        unique = self.tables.unique_counts()
        report = Report(
            unique_first_count=unique['first'],
            unique_last_count=unique['last'],
            unique_full_count=unique['full'],
            top_first=top(rank(self.tables.first), self.top_count),
            top_last=top(rank(self.tables.last), self.top_count),
            selected_pairs=self.selector.pairs,
            total_lines=self.lines_seen,
            total_records=self.tables.records,
        )
        logger.debug(
            f"Built report from {self.lines_seen} lines: {self.tables.records} records, "
            f"{self.lines_seen - self.tables.records} skipped, {len(self.selector)} pairs selected"
        )
        return report


def build_report(lines: Iterable[str], top_count: int = DEFAULT_TOP_COUNT,
                 selection_limit: int = DEFAULT_SELECTION_LIMIT) -> Report:
    """Run the whole census over `lines` and return the Report."""
    return CensusBuilder(top_count, selection_limit).consume(lines).build_report()
