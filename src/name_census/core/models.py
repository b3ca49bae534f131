#!/usr/bin/env python3
"""
Core models and report schema for Name Census.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Record:
    first: str
    last: str
    full: str


@dataclass(frozen=True)
class NameCount:
    name: str
    count: int


@dataclass(frozen=True)
class NamePair:
    first: str
    last: str


@dataclass(frozen=True)
class Report:
    unique_first_count: int = 0
    unique_last_count: int = 0
    unique_full_count: int = 0
    top_first: Tuple[NameCount, ...] = field(default_factory=tuple)
    top_last: Tuple[NameCount, ...] = field(default_factory=tuple)
    selected_pairs: Tuple[NamePair, ...] = field(default_factory=tuple)
    total_lines: int = 0
    total_records: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
