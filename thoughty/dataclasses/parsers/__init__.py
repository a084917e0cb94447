"""
Parsers for converting journal text into entry records.

Modules:
    txt_parser: Decodes the delimited journal text format
"""

from .txt_parser import LineKind, TxtParser, parse_text_file

__all__ = ["LineKind", "TxtParser", "parse_text_file"]
