#!/usr/bin/env python3
"""
txt_parser.py
-------------------

Parse journal text files back into EntryRecords.

The parser is a small state machine. Every line is classified once:

- SEPARATOR     entry or same-day separator line
- DATE_HEADER   ``{prefix}2024-01-15{suffix}{open}tags{close}``
- INDEX_HEADER  ``{prefix}2{suffix}{open}tags{close}``, once a date is known
- CONTENT       any other line while an entry is open
- UNRECOGNIZED  any other line while no entry is open

and then applied to the state (current date, open entry, content buffer).

The parser is forgiving on purpose, since files are edited by hand:
unrecognized lines are dropped and entries whose trimmed content is
empty are discarded. It never raises on malformed input.

Note that the date token grammar is fixed to 4-2-2 digits separated by
``-``, ``.`` or ``/`` whatever ``date_format`` says; the template only
decides which captured characters are the year, month and day.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

# ---- Local imports ----
from thoughty.dataclasses.format_config import FormatConfig, resolve_config
from thoughty.dataclasses.txt_entry import EntryRecord
from thoughty.utils.dates import parse_date


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Constants -----
DATE_TOKEN = r"\d{4}[-./]\d{2}[-./]\d{2}"
INDEX_TOKEN = r"\d+"
TAG_LIST = r"[^\]]*?"


# ----- Line classification -----
class LineKind(Enum):
    """Classification of a single input line."""

    SEPARATOR = "separator"
    DATE_HEADER = "date_header"
    INDEX_HEADER = "index_header"
    CONTENT = "content"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A line together with its classification.

    Attributes:
        kind: What the line is
        raw: The line as read, untrimmed
        marker: Captured date token or index digits (headers only)
        tags: Parsed tags (headers only)
    """

    kind: LineKind
    raw: str
    marker: Optional[str] = None
    tags: List[str] = field(default_factory=list)


@dataclass
class ParserState:
    """Mutable state of one parse."""

    current_date: Optional[str] = None
    current_entry: Optional[EntryRecord] = None
    buffer: List[str] = field(default_factory=list)
    entries: List[EntryRecord] = field(default_factory=list)
    dropped: int = 0


# ----- Parser -----
class TxtParser:
    """
    Decode journal text with a given FormatConfig.

    A parser instance holds the state of a single parse; use
    ``parse_text_file`` or a fresh instance per document.

    Attributes:
        config: Tokens of the text grammar
        date_pattern: Compiled full-date header pattern
        index_pattern: Compiled same-day index header pattern
        state: Current parse state
    """

    def __init__(self, config: Union[FormatConfig, Mapping[str, Any], None] = None):
        self.config = resolve_config(config)
        self.date_pattern = self._header_pattern(DATE_TOKEN)
        self.index_pattern = self._header_pattern(INDEX_TOKEN)
        self.state = ParserState()

    def _header_pattern(self, token: str) -> re.Pattern:
        cfg = self.config
        return re.compile(
            f"{re.escape(cfg.date_prefix)}({token}){re.escape(cfg.date_suffix)}"
            f"{re.escape(cfg.tag_open_bracket)}({TAG_LIST}){re.escape(cfg.tag_close_bracket)}",
            re.ASCII,
        )

    # ---- Public API ----
    def parse(self, text: str) -> List[EntryRecord]:
        """
        Parse a whole document.

        Args:
            text: Document text with any mix of LF, CRLF or CR line endings

        Returns:
            Entries in document order
        """
        self.state = ParserState()
        for line in split_lines(text):
            self.step(line)
        self._flush()

        logger.debug(
            f"Parsed {len(self.state.entries)} entries, "
            f"dropped {self.state.dropped} empty entries"
        )
        return self.state.entries

    def classify(self, line: str) -> ClassifiedLine:
        """Classify one line against the current state."""
        cfg = self.config
        stripped = line.strip()

        if stripped in (cfg.entry_separator, cfg.same_day_separator):
            return ClassifiedLine(LineKind.SEPARATOR, line)

        match = self.date_pattern.fullmatch(stripped)
        if match:
            return ClassifiedLine(
                LineKind.DATE_HEADER, line, match.group(1), self.parse_tags(match.group(2))
            )

        match = self.index_pattern.fullmatch(stripped)
        if match and self.state.current_date is not None:
            return ClassifiedLine(
                LineKind.INDEX_HEADER, line, match.group(1), self.parse_tags(match.group(2))
            )

        if self.state.current_entry is not None:
            return ClassifiedLine(LineKind.CONTENT, line)
        return ClassifiedLine(LineKind.UNRECOGNIZED, line)

    def step(self, line: str) -> LineKind:
        """Classify a line and apply the matching transition."""
        classified = self.classify(line)
        state = self.state

        if classified.kind is LineKind.SEPARATOR:
            self._flush()

        elif classified.kind is LineKind.DATE_HEADER:
            self._flush()
            state.current_date = parse_date(classified.marker, self.config.date_format)
            state.current_entry = EntryRecord(
                date=state.current_date, index=1, tags=classified.tags
            )

        elif classified.kind is LineKind.INDEX_HEADER:
            self._flush()
            state.current_entry = EntryRecord(
                date=state.current_date,
                index=int(classified.marker),
                tags=classified.tags,
            )

        elif classified.kind is LineKind.CONTENT:
            state.buffer.append(classified.raw)

        return classified.kind

    def parse_tags(self, tag_list: str) -> List[str]:
        """Split a bracketed tag list, dropping blank tags."""
        separator = self.config.tag_separator
        parts = tag_list.split(separator) if separator else [tag_list]
        return [tag.strip() for tag in parts if tag.strip()]

    # ---- Helpers ----
    def _flush(self) -> None:
        """Close the open entry; keep it only if it has content."""
        state = self.state
        if state.current_entry is None:
            return

        content = "\n".join(state.buffer).strip()
        if content:
            state.current_entry.content = content
            state.entries.append(state.current_entry)
        else:
            state.dropped += 1

        state.current_entry = None
        state.buffer = []


# ----- Module API -----
def split_lines(text: str) -> List[str]:
    """Normalize CRLF and CR to LF and split into lines."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def parse_text_file(
    text: str,
    config: Union[FormatConfig, Mapping[str, Any], None] = None,
) -> List[EntryRecord]:
    """
    Parse journal text into EntryRecords.

    Args:
        text: Document text
        config: FormatConfig, or partial overrides merged over the defaults

    Returns:
        Entries in document order, never raising on malformed input
    """
    return TxtParser(config).parse(text or "")
