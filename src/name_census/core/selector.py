#!/usr/bin/env python3
"""
Distinct-pair selector.

Greedy first-fit admission of (first, last) pairs so that no first name and no
last name appears twice in the selection. The result depends on input order
and is never randomized.
"""

from __future__ import annotations

from typing import List, Set, Tuple

from name_census.config import DEFAULT_SELECTION_LIMIT
from name_census.core.models import NamePair, Record


class DistinctPairSelector:
    """Admits at most `limit` pairs with pairwise distinct first and last names."""

    def __init__(self, limit: int = DEFAULT_SELECTION_LIMIT):
        if not isinstance(limit, int) or limit < 0:
            raise ValueError(f"Selection limit must be a non-negative integer, got {limit!r}")
        self.limit = limit
        self.firsts: Set[str] = set()
        self.lasts: Set[str] = set()
        self._pairs: List[NamePair] = []

    @property
    def is_full(self) -> bool:
        return len(self._pairs) >= self.limit

    def can_admit(self, record: Record) -> bool:
        return (not self.is_full
                and record.first not in self.firsts
                and record.last not in self.lasts)

    def admit(self, record: Record) -> bool:
        """Admit the record's names if all three admission rules hold.

        Returns True when the pair was added, False when the state is unchanged.
        """
        if not self.can_admit(record):
            return False
        self.firsts.add(record.first)
        self.lasts.add(record.last)
        self._pairs.append(NamePair(first=record.first, last=record.last))
        return True

    @property
    def pairs(self) -> Tuple[NamePair, ...]:
        """Selected pairs in admission order."""
        return tuple(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)
