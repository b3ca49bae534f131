#!/usr/bin/env python3
"""
Record parser.

Turns raw header lines of the form ``Last, First -- tag`` into Records. Any
other line (description lines, blanks, malformed headers) yields nothing.
"""

import re
from typing import Iterable, Iterator, Optional

from name_census.config import NAME_PATTERN
from name_census.core.models import Record

_NAME_RE = re.compile(NAME_PATTERN)


def parse_line(line: str) -> Optional[Record]:
    """Extract a Record from one line, or None when the line is not a header."""
    match = _NAME_RE.match(line)
    if match is None:
        return None
    return Record(first=match.group('first'), last=match.group('last'), full=match.group('full'))


def parse_lines(lines: Iterable[str]) -> Iterator[Record]:
    """Lazily map lines to Records, dropping lines that do not parse."""
    for line in lines:
        record = parse_line(line)
        if record is not None:
            yield record
