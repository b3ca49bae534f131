#!/usr/bin/env python3
"""
Frequency accumulator: occurrence counts by first, last and full name.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable

from name_census.core.models import Record


class NameTables:
    """Three default-zero count tables updated once per observed record."""

    def __init__(self):
        self.first: Counter = Counter()
        self.last: Counter = Counter()
        self.full: Counter = Counter()
        self.records = 0

    def observe(self, record: Record) -> NameTables:
        self.first[record.first] += 1
        self.last[record.last] += 1
        self.full[record.full] += 1
        self.records += 1
        return self

    def observe_all(self, records: Iterable[Record]) -> NameTables:
        for record in records:
            self.observe(record)
        return self

    def merge(self, other: NameTables) -> NameTables:
        """Return a new table set holding the key-wise sums of both inputs."""
        merged = NameTables()
        merged.first = self.first + other.first
        merged.last = self.last + other.last
        merged.full = self.full + other.full
        merged.records = self.records + other.records
        return merged

    def unique_counts(self) -> Dict[str, int]:
        return {
            'first': len(self.first),
            'last': len(self.last),
            'full': len(self.full),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, NameTables):
            return NotImplemented
        return (self.first == other.first and self.last == other.last
                and self.full == other.full and self.records == other.records)

    def __repr__(self) -> str:
        return (f"NameTables(first={len(self.first)}, last={len(self.last)}, "
                f"full={len(self.full)}, records={self.records})")
