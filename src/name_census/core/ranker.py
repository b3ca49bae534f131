#!/usr/bin/env python3
"""
Ranker: turns count tables into ordered (name, count) lists.

Entries are ordered by count descending; equal counts are ordered by name
ascending so that rankings are reproducible.
"""

from typing import Mapping, Sequence, Tuple

from name_census.core.models import NameCount


def _rank_key(item):
    name, count = item
    return (-count, name)


def rank(table: Mapping[str, int]) -> Tuple[NameCount, ...]:
    return tuple(NameCount(name=name, count=count)
                 for name, count in sorted(table.items(), key=_rank_key))


def top(ranked: Sequence[NameCount], n: int) -> Tuple[NameCount, ...]:
    """First n entries of a ranked list (fewer if the list is shorter)."""
    if n <= 0:
        return ()
    return tuple(ranked[:n])
