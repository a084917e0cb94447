"""
Utilities package for Thoughty.

- dates: Date token formatting and parsing (YYYY / MM / DD)
- duplicates: Matching imported entries against stored ones

Import the date helpers directly from this package:
    from thoughty.utils import format_date, parse_date

Duplicate detection lives in its own module:
    from thoughty.utils.duplicates import find_duplicates
"""

from .dates import (
    DAY_TOKEN,
    MONTH_TOKEN,
    YEAR_TOKEN,
    format_date,
    parse_date,
    to_iso_date,
)

__all__ = [
    "DAY_TOKEN",
    "MONTH_TOKEN",
    "YEAR_TOKEN",
    "format_date",
    "parse_date",
    "to_iso_date",
]
