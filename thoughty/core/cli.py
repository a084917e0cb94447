#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for Thoughty commands.

Functions:
    setup_logger: Initialize ThoughtyLogger for CLI operations
    get_db: Open (once per invocation) the database named on the command line

Classes:
    OperationStats: Base class for all statistics
    ImportStats: For text imports (parsed, imported, skipped entries)
    ExportStats: For text exports and re-encodings

Usage:
    from thoughty.core.cli import setup_logger, ImportStats

    logger = setup_logger(log_dir, "journal_io")
    stats = ImportStats(total_processed=3)
    stats.entries_imported += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional

# --- Third party imports ---
import click

# --- Local imports ---
from thoughty.core.logging_manager import ThoughtyLogger
from thoughty.database.manager import ThoughtyDB


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> ThoughtyLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a ThoughtyLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'cli', 'journal_io')

    Returns:
        Configured ThoughtyLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ThoughtyLogger(operations_log_dir, component_name=component_name)


def get_db(ctx: click.Context) -> ThoughtyDB:
    """
    Return the database for this CLI invocation, opening it on first use.

    Expects ``db_path`` and ``log_dir`` in ``ctx.obj`` (set by the root group).
    """
    obj = ctx.ensure_object(dict)
    if obj.get("db") is None:
        obj["db"] = ThoughtyDB(obj["db_path"], log_dir=obj.get("log_dir"))
        ctx.call_on_close(obj["db"].dispose)
    return obj["db"]


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """
        Get elapsed time in seconds (cached after first call).

        Returns:
            Seconds elapsed since start_time
        """
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON output.

        Returns:
            Dictionary with all metrics and computed duration
        """
        return {
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ImportStats(OperationStats):
    """
    Statistics for text imports.

    Attributes:
        total_processed: Number of entries parsed from the uploaded text
        entries_imported: Number of entries persisted
        entries_skipped: Number of entries skipped as duplicates
    """
    total_processed: int = 0
    entries_imported: int = 0
    entries_skipped: int = 0

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        if self.total_processed < 0:
            raise ValueError(f"total_processed must be non-negative, got {self.total_processed}")
        if self.entries_imported < 0:
            raise ValueError(f"entries_imported must be non-negative, got {self.entries_imported}")
        if self.entries_skipped < 0:
            raise ValueError(f"entries_skipped must be non-negative, got {self.entries_skipped}")

    @property
    def success(self) -> bool:
        """An import succeeds when no entry failed to persist."""
        return self.errors == 0

    def summary(self) -> str:
        """Get formatted summary with entry metrics."""
        return (
            f"{self.total_processed} entries parsed, "
            f"{self.entries_imported} imported, "
            f"{self.entries_skipped} skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with entry metrics."""
        d = super().to_dict()
        d.update({
            "success": self.success,
            "total_processed": self.total_processed,
            "entries_imported": self.entries_imported,
            "entries_skipped": self.entries_skipped,
        })
        return d


@dataclass
class ExportStats(OperationStats):
    """
    Statistics for export operations.

    Attributes:
        entries_exported: Number of entries written to the text file
        files_created: Number of files written
    """
    entries_exported: int = 0
    files_created: int = 0

    def __post_init__(self) -> None:
        """Validate statistics on initialization."""
        super().__post_init__()
        if self.entries_exported < 0:
            raise ValueError(f"entries_exported must be non-negative, got {self.entries_exported}")
        if self.files_created < 0:
            raise ValueError(f"files_created must be non-negative, got {self.files_created}")

    def summary(self) -> str:
        """Get formatted summary with export metrics."""
        return (
            f"{self.entries_exported} entries exported, "
            f"{self.files_created} files created, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with export metrics."""
        d = super().to_dict()
        d.update({
            "entries_exported": self.entries_exported,
            "files_created": self.files_created,
        })
        return d
