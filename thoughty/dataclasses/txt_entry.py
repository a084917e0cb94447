#!/usr/bin/env python3
"""
txt_entry.py
-------------------

Defines the EntryRecord dataclass: one journal entry as it travels through
the text-format codec, and DuplicateMatch, the pairing reported by the
duplicate detector during imports.

Each EntryRecord contains:
- date (ISO 'YYYY-MM-DD' string)
- index (1-based position among entries of the same date)
- tags
- content

Records carry no user, diary or storage information. They are built from
parsed text, from plain mappings, or from persisted ORM rows.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

# ---- Local imports ----
from thoughty.utils.dates import to_iso_date


# ----- Dataclasses -----
@dataclass
class EntryRecord:
    """
    A single journal entry in codec form.

    Attributes:
        date (str): Calendar date, 'YYYY-MM-DD'.
        index (int): Position among the entries sharing the date, from 1.
        tags (List[str]): Ordered tags, possibly empty.
        content (str): Free text, may span several lines.
    """

    date: str
    index: int = 1
    tags: List[str] = field(default_factory=list)
    content: str = ""

    def __post_init__(self) -> None:
        """Normalize dates given as date, datetime or ISO datetime strings."""
        self.date = to_iso_date(self.date)

    # ---- Public constructors ----
    @classmethod
    def from_source(cls, source: Any) -> EntryRecord:
        """
        Build a record from a mapping or any object with entry attributes.

        Dates are normalized to ISO strings; missing tags and content
        become empty values.
        """
        if isinstance(source, EntryRecord):
            return source

        return cls(
            date=to_iso_date(entry_field(source, "date")),
            index=int(entry_field(source, "index") or 1),
            tags=list(entry_field(source, "tags") or []),
            content=entry_field(source, "content") or "",
        )

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "index": self.index,
            "tags": list(self.tags),
            "content": self.content,
        }

    @property
    def sort_key(self) -> Tuple[str, int]:
        return (self.date, self.index)


@dataclass
class DuplicateMatch:
    """
    A parsed entry paired with an already persisted entry sharing its
    date and trimmed content.

    Attributes:
        imported (EntryRecord): Entry parsed from the uploaded text.
        existing (Any): The persisted entry it duplicates (record,
            mapping or ORM row, whatever the caller passed in).
    """

    imported: EntryRecord
    existing: Any

    def summary(self, length: int = 100) -> Dict[str, str]:
        """Short description of the imported side, for previews."""
        content = self.imported.content
        if len(content) > length:
            content = content[:length] + "..."
        return {"date": self.imported.date, "content": content}


# ----- Helpers -----
def entry_field(source: Any, name: str) -> Any:
    """Read ``name`` from a mapping key or an attribute, None when absent."""
    if isinstance(source, dict):
        return source.get(name)
    return getattr(source, name, None)
