#!/usr/bin/env python3
"""
Sample Data Generator Module
Generates people record files in the census input format: a
"Last, First -- tag" header followed by an indented description line.
"""

import os
import random
import logging
from typing import Iterator, List, Optional
from name_census.config import (
    DEFAULT_ENCODING, SAMPLE_FIRST_NAMES, SAMPLE_LAST_NAMES, SAMPLE_TAGS, SAMPLE_WORDS
)

logger = logging.getLogger(__name__)

class SampleGenerator:
    """Generate random people records from fixed name pools."""
    
    def __init__(self, seed: Optional[int] = None,
                 first_names: Optional[List[str]] = None,
                 last_names: Optional[List[str]] = None):
        self.rng = random.Random(seed)
        self.first_names = list(SAMPLE_FIRST_NAMES if first_names is None else first_names)
        self.last_names = list(SAMPLE_LAST_NAMES if last_names is None else last_names)
        if not self.first_names or not self.last_names:
            raise ValueError("Name pools must not be empty")
    
    def header_line(self) -> str:
        last = self.rng.choice(self.last_names)
        first = self.rng.choice(self.first_names)
        return f"{last}, {first} -- {self.rng.choice(SAMPLE_TAGS)}"
    
    def description_line(self) -> str:
        words = self.rng.sample(SAMPLE_WORDS, self.rng.randint(3, 6))
        return "    " + " ".join(words).capitalize() + "."
    
    def generate_lines(self, count: int) -> Iterator[str]:
        """Yield `count` records as header/description line pairs (no newlines)."""
        if count < 0:
            raise ValueError(f"Record count must be non-negative, got {count}")
        for _ in range(count):
            yield self.header_line()
            yield self.description_line()

def generate_sample_lines(count: int, seed: Optional[int] = None,
                          first_names: Optional[List[str]] = None,
                          last_names: Optional[List[str]] = None) -> Iterator[str]:
    """Generate `count` sample records; deterministic for a given seed."""
    generator = SampleGenerator(seed, first_names, last_names)
    return generator.generate_lines(count)

def write_sample_file(path: str, count: int, seed: Optional[int] = None,
                      encoding: str = DEFAULT_ENCODING) -> int:
    """Write sample records to `path` and return the number of records written."""
    lines = generate_sample_lines(count, seed)
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding=encoding) as f:
        for line in lines:
            f.write(line + "\n")
    logger.info(f"Generated {count} sample records in {path}")
    return count
