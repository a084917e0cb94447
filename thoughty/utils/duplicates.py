"""
duplicates.py
-------------------
Duplicate detection for journal imports.

A parsed entry duplicates an existing one when both fall on the same
calendar date and their contents are equal once surrounding whitespace
is trimmed. Tags and per-day indices are not compared.
"""
from __future__ import annotations

# --- Standard library imports ---
import logging
from typing import Any, Iterable, List, Sequence

# --- Local imports ---
from thoughty.dataclasses.txt_entry import DuplicateMatch, EntryRecord, entry_field
from thoughty.utils.dates import to_iso_date


logger = logging.getLogger(__name__)


def is_duplicate(imported: EntryRecord, existing: Any) -> bool:
    """
    input: imported, a parsed EntryRecord; existing, a record, mapping or ORM row
    output: True when dates match and trimmed contents are identical
    """
    if to_iso_date(entry_field(existing, "date")) != imported.date:
        return False
    return (entry_field(existing, "content") or "").strip() == imported.content.strip()


def find_duplicates(
    parsed_entries: Iterable[EntryRecord],
    existing_entries: Sequence[Any],
) -> List[DuplicateMatch]:
    """
    Pair each parsed entry with the first existing entry it duplicates.

    Each parsed entry yields at most one match, so several existing copies
    of the same text are reported once.

    Args:
        parsed_entries: Entries decoded from the uploaded text
        existing_entries: Persisted entries (records, mappings or ORM rows)

    Returns:
        Matches in the order of ``parsed_entries``
    """
    matches: List[DuplicateMatch] = []

    for imported in parsed_entries:
        for existing in existing_entries:
            if is_duplicate(imported, existing):
                matches.append(DuplicateMatch(imported=imported, existing=existing))
                break

    logger.debug(f"Found {len(matches)} duplicates among {len(existing_entries)} existing entries")
    return matches
