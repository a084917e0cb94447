"""
Data structures for journal text.

- format_config: The eight configurable tokens of the text layout
- txt_entry: Entry records exchanged with the codec
- parsers: The line-by-line text parser
"""

from .format_config import DEFAULT_FORMAT, FormatConfig, validate_format_config
from .txt_entry import DuplicateMatch, EntryRecord

__all__ = [
    "DEFAULT_FORMAT",
    "DuplicateMatch",
    "EntryRecord",
    "FormatConfig",
    "validate_format_config",
]
