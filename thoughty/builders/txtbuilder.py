#!/usr/bin/env python3
"""
txtbuilder.py
-------------------
Serialize journal entries into the delimited text format used for
backups, exports and hand editing.

Layout (default tokens):

    ---2024-01-15--[tag1,tag2]
    First entry of the day

    ********************************************************************************

    ---2--[tag3]
    Second entry of the day

    --------------------------------------------------------------------------------

The first entry of a date carries the formatted date in its header; the
following entries of that date carry only their index. The parser tracks
the current date the same way, so the file stays unambiguous.

Usage:
    from thoughty.builders.txtbuilder import generate_text_file

    text = generate_text_file(entries, config)
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from thoughty.dataclasses.format_config import FormatConfig, resolve_config
from thoughty.dataclasses.txt_entry import EntryRecord
from thoughty.utils.dates import format_date


logger = logging.getLogger(__name__)

LINE_ENDING = "\r\n"


def generate_text_file(
    entries: Iterable[Any],
    config: Union[FormatConfig, Mapping[str, Any], None] = None,
) -> str:
    """
    Render entries as journal text.

    Entries are sorted by (date, index) before rendering; the input is
    not modified. A missing content renders as an empty line.

    Args:
        entries: EntryRecords, mappings or ORM rows with date/index/tags/content
        config: FormatConfig, or partial overrides merged over the defaults

    Returns:
        The document with CRLF line endings, '' when there are no entries
    """
    fmt = resolve_config(config)
    records = sorted(
        (EntryRecord.from_source(entry) for entry in entries),
        key=lambda record: record.sort_key,
    )

    lines: List[str] = []
    current_date: Optional[str] = None

    for record in records:
        if record.date != current_date:
            if current_date is not None:
                lines.extend(["", fmt.entry_separator])
            current_date = record.date
            marker = format_date(record.date, fmt.date_format)
            lines.append("")
        else:
            marker = str(record.index)
            lines.extend(["", fmt.same_day_separator, ""])

        lines.append(
            f"{fmt.date_prefix}{marker}{fmt.date_suffix}{fmt.tag_expression(record.tags)}"
        )
        lines.append(record.content or "")

    if records:
        lines.extend(["", fmt.entry_separator])

    logger.debug(f"Rendered {len(records)} entries into {len(lines)} lines")
    return LINE_ENDING.join(lines)

