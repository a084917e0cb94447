"""
Thoughty Journal I/O
===============================

Import and export of journal entries as plain text.

A journal text file lists entries in chronological order. Each date opens
with a header (``---2024-01-15--[work,ideas]`` with the default tokens),
further entries of the same date with an index header (``---2--[home]``),
and separator lines divide the blocks. Every token of that layout is
configurable per user.

Main Components:
    - builders: Text generation (entries -> journal text)
    - dataclasses: Format configuration, entry records and the text parser
    - database: SQLAlchemy ORM with entry, diary and setting managers
    - pipeline: Import/export services and the command-line interface
    - core: Logging, exceptions, paths and shared CLI helpers
    - utils: Date tokens and duplicate detection

Primary Interfaces:
    - thoughty.pipeline.cli: Command-line interface
    - thoughty.pipeline.journal_io: Import/export services
    - thoughty.database.manager.ThoughtyDB: Main database interface

Example Usage:
    >>> from thoughty import generate_text_file, parse_text_file
    >>> text = generate_text_file([{"date": "2024-01-15", "content": "Hi"}])
    >>> parse_text_file(text)[0].content
    'Hi'

Version: 2.0.0
License: MIT
"""

__version__ = "2.0.0"
__author__ = "Thoughty Project"

# Expose primary interfaces for convenience
from thoughty.builders.txtbuilder import generate_text_file
from thoughty.dataclasses.format_config import (
    DEFAULT_FORMAT,
    FormatConfig,
    validate_format_config,
)
from thoughty.dataclasses.parsers import parse_text_file
from thoughty.database.manager import ThoughtyDB
from thoughty.utils.duplicates import find_duplicates

__all__ = [
    "DEFAULT_FORMAT",
    "FormatConfig",
    "ThoughtyDB",
    "find_duplicates",
    "generate_text_file",
    "parse_text_file",
    "validate_format_config",
]
