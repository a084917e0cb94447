#!/usr/bin/env python3
"""
journal_io.py
-------------------
Import and export of journal text files.

Glues the text-format codec to storage:
- the user's format tokens are stored as settings prefixed with ``io_``
- exports render a user's entries (optionally one diary) as journal text
- previews parse an upload and report which entries already exist
- imports persist parsed entries, skipping duplicates unless told not to

Persisted entries get fresh per-day indices (appended after the user's
existing entries of that date); the indices written in the file only
order entries within the document.

Programmatic API:
    from thoughty.pipeline.journal_io import export_entries, import_entries

    with db.session_scope() as session:
        result = export_entries(session, user_id=1)
        stats = import_entries(session, user_id=1, content=text)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

# --- Third party ---
from sqlalchemy.orm import Session

# --- Local imports ---
from thoughty.builders.txtbuilder import generate_text_file
from thoughty.core.cli import ExportStats, ImportStats
from thoughty.core.exceptions import ExportError, ImportLimitError, ValidationError
from thoughty.core.logging_manager import ThoughtyLogger, safe_logger
from thoughty.dataclasses.format_config import (
    DEFAULT_FORMAT,
    FormatConfig,
    validate_format_config,
)
from thoughty.dataclasses.parsers.txt_parser import parse_text_file
from thoughty.dataclasses.txt_entry import EntryRecord
from thoughty.database.managers import DiaryManager, EntryManager, SettingManager
from thoughty.utils.duplicates import find_duplicates


# ----- Limits & settings -----
MAX_IMPORT_SIZE = 5 * 1024 * 1024
"""Largest accepted upload, in characters."""

MAX_ENTRIES_PER_IMPORT = 10000

SETTINGS_PREFIX = "io_"
PREVIEW_LENGTH = 100


# ----- Results -----
@dataclass
class ExportResult:
    """Rendered export text and its suggested file name."""

    content: str
    filename: str
    stats: ExportStats = field(default_factory=ExportStats)


@dataclass
class ImportPreview:
    """
    What an import would do, without persisting anything.

    Attributes:
        entries: Parsed entries in document order
        duplicates: ``{date, content}`` summaries of entries already stored
    """

    entries: List[EntryRecord]
    duplicates: List[Dict[str, str]]

    @property
    def total_count(self) -> int:
        return len(self.entries)

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicates)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [entry.to_dict() for entry in self.entries],
            "totalCount": self.total_count,
            "duplicates": self.duplicates,
            "duplicateCount": self.duplicate_count,
        }


# ----- Format settings -----
def get_format_config(
    session: Session, user_id: int, logger: Optional[ThoughtyLogger] = None
) -> FormatConfig:
    """
    Load the user's format tokens merged over the defaults.

    Returns:
        Validated FormatConfig
    """
    stored = SettingManager(session, logger).get_prefixed(user_id, SETTINGS_PREFIX)
    merged = {**DEFAULT_FORMAT.to_dict(), **stored}
    return validate_format_config(merged)


def save_format_config(
    session: Session,
    user_id: int,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[ThoughtyLogger] = None,
) -> Tuple[bool, FormatConfig]:
    """
    Validate overrides and store all eight tokens for the user.

    Tokens missing from ``overrides`` are stored with their default values.

    Returns:
        (True, stored config)
    """
    config = validate_format_config(overrides)
    settings = SettingManager(session, logger)

    for key, value in config.to_dict().items():
        settings.upsert(user_id, f"{SETTINGS_PREFIX}{key}", str(value))

    safe_logger(logger).log_operation(
        "format_saved", {"user_id": user_id, "config": config.to_dict()}
    )
    return True, config


# ----- Validation -----
def validate_import_content(content: Any) -> None:
    """
    Reject uploads the parser should not see.

    Raises:
        ValidationError: If content is missing or not text
        ImportLimitError: If content exceeds MAX_IMPORT_SIZE
    """
    if content is None or content == "":
        raise ValidationError("File content is required")
    if not isinstance(content, str):
        raise ValidationError("Content must be a string")
    if len(content) > MAX_IMPORT_SIZE:
        raise ImportLimitError(
            f"File too large. Maximum size is {MAX_IMPORT_SIZE // 1024 // 1024}MB"
        )


# ----- Export -----
def export_filename(diary_id: Optional[int] = None, today: Optional[date] = None) -> str:
    """Suggested download name, e.g. ``thoughty_diary3_export_2024-01-15.txt``."""
    today = today or datetime.now(timezone.utc).date()
    diary_label = f"diary{diary_id}_" if diary_id else ""
    return f"thoughty_{diary_label}export_{today.isoformat()}.txt"


def export_entries(
    session: Session,
    user_id: int,
    diary_id: Optional[int] = None,
    today: Optional[date] = None,
    logger: Optional[ThoughtyLogger] = None,
) -> ExportResult:
    """
    Render the user's entries as journal text.

    Args:
        session: Active database session
        user_id: Owner of the entries
        diary_id: Export only this diary when given
        today: Date used in the file name (defaults to today, UTC)
        logger: Optional logger

    Returns:
        ExportResult with the text and its file name
    """
    stats = ExportStats()
    config = get_format_config(session, user_id, logger)
    entries = EntryManager(session, logger).list_for_user(user_id, diary_id)

    content = generate_text_file(entries, config)
    stats.entries_exported = len(entries)

    safe_logger(logger).log_operation(
        "export_complete", {"user_id": user_id, "diary_id": diary_id}
    )
    safe_logger(logger).log_stats("export", stats)
    return ExportResult(
        content=content,
        filename=export_filename(diary_id, today),
        stats=stats,
    )


def write_export(
    result: ExportResult,
    destination: Union[str, Path],
    logger: Optional[ThoughtyLogger] = None,
) -> Path:
    """
    Write an export to disk.

    ``destination`` is a directory when it exists as one, ends with a path
    separator or has no file suffix; the suggested file name is used
    inside it (created if missing). Anything else is the file path.

    Raises:
        ExportError: If the file cannot be written
    """
    target = Path(destination)
    path = target / result.filename if is_directory_target(destination) else target

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(result.content.encode("utf-8"))
    except OSError as e:
        safe_logger(logger).log_error(e, {"operation": "write_export", "path": str(path)})
        raise ExportError(f"Cannot write export file {path}: {e}") from e

    result.stats.files_created += 1
    safe_logger(logger).log_debug(f"Export written to {path}")
    return path


# ----- Import -----
def preview_import(
    session: Session,
    user_id: int,
    content: Any,
    diary_id: Optional[int] = None,
    logger: Optional[ThoughtyLogger] = None,
) -> ImportPreview:
    """
    Parse an upload and report duplicates without persisting.

    Raises:
        ValidationError: If content is missing or not text
        ImportLimitError: If content is too large
    """
    validate_import_content(content)

    config = get_format_config(session, user_id, logger)
    parsed = parse_text_file(content, config)

    existing = EntryManager(session, logger).list_for_user(user_id, diary_id)
    duplicates = find_duplicates(parsed, existing)

    safe_logger(logger).log_operation(
        "import_preview",
        {"user_id": user_id, "parsed": len(parsed), "duplicates": len(duplicates)},
    )
    return ImportPreview(
        entries=parsed,
        duplicates=[match.summary(PREVIEW_LENGTH) for match in duplicates],
    )


def import_entries(
    session: Session,
    user_id: int,
    content: Any,
    skip_duplicates: bool = True,
    diary_id: Optional[int] = None,
    logger: Optional[ThoughtyLogger] = None,
) -> ImportStats:
    """
    Parse an upload and persist its entries.

    Processing Flow:
    1. Validates the upload (presence, type, size)
    2. Parses it with the user's format tokens
    3. Rejects uploads with more than MAX_ENTRIES_PER_IMPORT entries
    4. Resolves the target diary (given id, else the default diary)
    5. Marks duplicates of the user's existing entries (unless disabled)
    6. Persists the remaining entries as private entries, appending each
       after the user's existing entries of its date

    Entries with an impossible date (e.g. ``2024-13-40``) are counted as
    errors and skipped; the rest of the import proceeds.

    Args:
        session: Active database session
        user_id: Owner of the new entries
        content: Uploaded journal text
        skip_duplicates: Skip entries already stored (default True)
        diary_id: Target diary; also restricts the duplicate search
        logger: Optional logger

    Returns:
        ImportStats with imported / skipped / error counts

    Raises:
        ValidationError: If content is invalid or the diary does not exist
        ImportLimitError: If the upload is too large or has too many entries
    """
    validate_import_content(content)

    config = get_format_config(session, user_id, logger)
    parsed = parse_text_file(content, config)

    if len(parsed) > MAX_ENTRIES_PER_IMPORT:
        raise ImportLimitError(
            f"Too many entries. Maximum {MAX_ENTRIES_PER_IMPORT} entries per import. "
            f"Found {len(parsed)}."
        )

    stats = ImportStats(total_processed=len(parsed))
    entry_manager = EntryManager(session, logger)
    target_diary_id = _resolve_target_diary(session, user_id, diary_id, logger)

    skip_ids = set()
    if skip_duplicates:
        existing = entry_manager.list_for_user(user_id, diary_id)
        skip_ids = {id(match.imported) for match in find_duplicates(parsed, existing)}

    safe_logger(logger).log_operation(
        "import_start",
        {
            "user_id": user_id,
            "parsed": len(parsed),
            "duplicates": len(skip_ids),
            "diary_id": target_diary_id,
        },
    )

    for record in parsed:
        if id(record) in skip_ids:
            stats.entries_skipped += 1
            continue

        try:
            entry_manager.create(
                user_id=user_id,
                entry_date=record.date,
                content=record.content,
                tags=record.tags,
                diary_id=target_diary_id,
                visibility="private",
            )
        except ValidationError as e:
            stats.errors += 1
            safe_logger(logger).log_error(
                e, {"operation": "import_entry", "date": record.date}
            )
            continue

        stats.entries_imported += 1

    safe_logger(logger).log_operation("import_complete", {"user_id": user_id})
    safe_logger(logger).log_stats("import", stats)
    return stats


def reencode_text(
    text: str,
    source: Optional[FormatConfig] = None,
    target: Optional[FormatConfig] = None,
) -> Tuple[str, int]:
    """
    Convert journal text between two sets of format tokens.

    Returns:
        (converted text, number of entries carried over)
    """
    entries = parse_text_file(text, source or DEFAULT_FORMAT)
    return generate_text_file(entries, target or DEFAULT_FORMAT), len(entries)


# --- Helpers ---
def is_directory_target(destination: Union[str, Path]) -> bool:
    """Whether an output path names a directory rather than a file."""
    raw = str(destination)
    if raw.endswith(("/", os.sep)):
        return True

    path = Path(destination)
    if path.exists():
        return path.is_dir()
    return path.suffix == ""


def _resolve_target_diary(
    session: Session,
    user_id: int,
    diary_id: Optional[int],
    logger: Optional[ThoughtyLogger],
) -> Optional[int]:
    """Use the given diary if it exists, else the user's default diary."""
    diaries = DiaryManager(session, logger)

    if diary_id is not None:
        if diaries.get(user_id, diary_id) is None:
            raise ValidationError(f"Diary {diary_id} not found")
        return diary_id

    default = diaries.get_default(user_id)
    return default.id if default is not None else None
