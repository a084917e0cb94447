"""
dates.py
-------------------
Date helpers for the journal text format.

Entry dates travel through the codec as canonical ISO strings
(``YYYY-MM-DD``). Header lines render them through a ``date_format``
template containing the literal tokens ``YYYY``, ``MM`` and ``DD``.
"""
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime, timezone
from typing import Any, Tuple


# ----- Constants -----
YEAR_TOKEN = "YYYY"
MONTH_TOKEN = "MM"
DAY_TOKEN = "DD"

# Token offsets in the canonical YYYY-MM-DD layout
_ISO_OFFSETS: Tuple[int, int, int] = (0, 5, 8)


# ----- Normalization -----
def to_iso_date(value: Any) -> str:
    """
    input: value, a date, datetime, ISO date/datetime string or None
    output: the calendar date as 'YYYY-MM-DD', or '' for None
    process:
      * aware datetimes are converted to UTC before taking the date
      * strings keep everything before a 'T' or space time separator
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    return text.split("T", 1)[0].split(" ", 1)[0]


# ----- Rendering -----
def format_date(value: Any, date_format: str) -> str:
    """
    Render a date through a YYYY/MM/DD template.

    Only the first occurrence of each token is substituted.

    Examples:
        >>> format_date("2024-01-05", "DD.MM.YYYY")
        '05.01.2024'
    """
    iso = to_iso_date(value)
    year, month, day = iso[0:4], iso[5:7], iso[8:10]
    return (
        date_format.replace(YEAR_TOKEN, year, 1)
        .replace(MONTH_TOKEN, month, 1)
        .replace(DAY_TOKEN, day, 1)
    )


def parse_date(token: str, date_format: str) -> str:
    """
    Map a captured header token back to an ISO date.

    The token is sliced at the character positions the template gives
    to ``YYYY``, ``MM`` and ``DD``; the separators between them are not
    checked. A template missing a token falls back to the ISO position
    for that field.

    Examples:
        >>> parse_date("05.01.2024", "DD.MM.YYYY")
        '2024-01-05'
    """
    year_idx, month_idx, day_idx = (
        _token_index(date_format, YEAR_TOKEN, _ISO_OFFSETS[0]),
        _token_index(date_format, MONTH_TOKEN, _ISO_OFFSETS[1]),
        _token_index(date_format, DAY_TOKEN, _ISO_OFFSETS[2]),
    )

    year = token[year_idx:year_idx + 4]
    month = token[month_idx:month_idx + 2]
    day = token[day_idx:day_idx + 2]

    return f"{year}-{month}-{day}"


def _token_index(date_format: str, token: str, fallback: int) -> int:
    idx = date_format.find(token)
    return idx if idx >= 0 else fallback
