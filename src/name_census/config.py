#!/usr/bin/env python3
"""
Name Census Configuration Module
"""

import logging

# Application Information
APP_NAME = "Name Census"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Count, rank and pair the names found in a people record file"

# Default Settings
DEFAULT_TOP_COUNT = 10
DEFAULT_SELECTION_LIMIT = 25
DEFAULT_ENCODING = "utf-8"
# Undecodable input bytes become U+FFFD; such lines never match NAME_PATTERN
INPUT_DECODE_ERRORS = "replace"
DEFAULT_LOG_LEVEL = logging.INFO

# Header line grammar: "Last, First -- tag". Description lines never match.
NAME_PATTERN = r'(?P<full>(?P<last>\w+), (?P<first>\w+)) -- '

# Progress refresh cadence while streaming (in lines)
PROGRESS_UPDATE_INTERVAL = 5000

# Logging configuration
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Output formats
OUTPUT_FORMATS = ['json', 'csv', 'txt']

# Error messages
ERROR_MESSAGES = {
    'input_not_found': "❌ Input file not found: {file}",
    'input_permission': "❌ Permission denied reading {file}",
    'unknown_encoding': "❌ Unknown encoding: {encoding}",
    'sample_write_failed': "❌ Could not write sample file {file}: {error}",
    'missing_input': "❌ An input file (or '-' for stdin) is required.",
    'negative_top': "❌ --top must be zero or a positive integer",
    'negative_limit': "❌ --limit must be zero or a positive integer",
    'invalid_sample_count': "❌ --generate-sample must be a positive integer",
    'unsupported_format': "❌ Unsupported output format: {fmt}",
    'interrupted': "⚠️  Operation interrupted by user.",
}

# Success messages
SUCCESS_MESSAGES = {
    'report_saved': "✅ Report saved to {file}",
    'sample_written': "✅ Wrote {count} sample records to {file}",
    'census_complete': "🎯 Census complete: {records} records from {lines} lines",
}

# Name pools for generated sample data
SAMPLE_FIRST_NAMES = [
    "Mckenna", "Garfield", "Mariah", "Agustina", "James", "Emma", "Michael", "Sophia",
    "William", "Olivia", "Alexander", "Ava", "Daniel", "Isabella", "David", "Mia",
    "Joseph", "Charlotte", "Andrew", "Amelia", "John", "Harper", "Christopher", "Evelyn",
    "Matthew", "Abigail", "Joshua", "Emily", "Ryan", "Elizabeth", "Nathan", "Sofia",
    "Kevin", "Avery", "Justin", "Ella", "Brandon", "Scarlett", "Samuel", "Victoria",
]

SAMPLE_LAST_NAMES = [
    "Graham", "Marvin", "McLaughlin", "Lang", "Smith", "Johnson", "Williams", "Brown",
    "Jones", "Garcia", "Miller", "Davis", "Rodriguez", "Martinez", "Hernandez", "Lopez",
    "Gonzalez", "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark", "Ramirez",
    "Lewis", "Robinson", "Walker", "Young", "Allen", "King", "Wright", "Scott",
]

SAMPLE_TAGS = [
    "ut", "non", "consequatur", "pariatur", "et", "quia", "est", "sed", "qui", "aut",
]

SAMPLE_WORDS = [
    "voluptatem", "ipsam", "et", "at", "facere", "necessitatibus", "animi", "eveniet",
    "temporibus", "ducimus", "amet", "eaque", "unde", "voluptas", "sit", "fugit",
]
