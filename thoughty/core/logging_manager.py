#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Log files for Thoughty components.

Each component (``cli``, ``database``, ...) gets a ThoughtyLogger writing
two size-rotated files in its log directory:

    <component>.log   every record, DEBUG and up
    errors.log        errors with context and traceback

Records carry a category tag and JSON details, e.g.

    OPERATION - import_complete: {"user_id": 1, "entries_imported": 3}
    STATS - export: {"errors": 0, "duration": 0.01, "entries_exported": 12}

Library code takes ``logger: Optional[ThoughtyLogger]`` and calls through
``safe_logger(logger)``, so it runs unchanged without logging configured.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

# --- Third party imports ---
import click

if TYPE_CHECKING:
    from thoughty.core.cli import OperationStats


FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
ERROR_FILE = "errors.log"


def format_details(tag: str, message: str, details: Optional[Dict[str, Any]] = None) -> str:
    """Render ``TAG - message: {json}``, omitting empty details."""
    line = f"{tag} - {message}"
    if details:
        line += f": {json.dumps(details, default=str, ensure_ascii=False)}"
    return line


def format_cli_error(error: Exception) -> str:
    """One-line error shown to CLI users."""
    return f"❌ {type(error).__name__}: {error}"


class ThoughtyLogger:
    """
    File logger for one component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component identifier, also the log file stem
        main_logger: Logger behind ``<component>.log`` (warnings also echoed
            to stderr)
        error_logger: Logger behind ``errors.log``
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "thoughty",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: 'cli', 'database', 'journal_io', ...
            max_bytes: Size at which a log file is rotated
            backup_count: Rotated files kept per log
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._build_logger(
            "operations", f"{component_name}.log", logging.DEBUG, console=True
        )
        self.error_logger = self._build_logger("errors", ERROR_FILE, logging.ERROR)

    def _build_logger(
        self, channel: str, filename: str, level: int, console: bool = False
    ) -> logging.Logger:
        """Create (or reset) ``<component>.<channel>`` with its handlers."""
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        # Replaces handlers left by an earlier instance for the same component
        self._detach(logger)

        file_handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.WARNING)
            console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
            logger.addHandler(console_handler)

        return logger

    @staticmethod
    def _detach(logger: logging.Logger) -> None:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def close(self) -> None:
        """Release the log files."""
        self._detach(self.main_logger)
        self._detach(self.error_logger)

    # ---- Records ----
    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a completed step (``OPERATION`` tag, INFO level)."""
        self.main_logger.info(format_details("OPERATION", operation, details or {}))

    def log_stats(self, operation: str, stats: OperationStats) -> None:
        """Record the counters of an import, export or conversion."""
        self.main_logger.info(format_details("STATS", operation, stats.to_dict()))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(format_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(format_details("INFO", message, details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.main_logger.warning(format_details("WARNING", message, details))

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Write an error to errors.log with its context and traceback.

        Context is rendered as ``key=value`` pairs on a second line.
        """
        self.error_logger.error(
            format_details("ERROR", f"{type(error).__name__}: {error}")
        )
        if context:
            pairs = ", ".join(f"{key}={value}" for key, value in context.items())
            self.error_logger.error(f"Context: {pairs}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised by a command and build the message for the user.

        Returns:
            ``❌ Type: message``, followed by the traceback when requested

        Examples:
            >>> logger.log_cli_error(ImportLimitError("File too large"))
            '❌ ImportLimitError: File too large'
        """
        self.log_error(error, context or {"source": "cli"})

        message = format_cli_error(error)
        if show_traceback:
            message += f"\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The error is logged through ``ctx.obj["logger"]`` (if any), echoed to
    stderr (with traceback under ``--verbose``) and the process exits with
    ``exit_code``. Never returns.
    """
    obj = ctx.obj or {}

    context: Dict[str, Any] = {"operation": operation}
    context.update(additional_context or {})

    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Stand-in with the ThoughtyLogger interface that records nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_stats(self, operation: str, stats: Any) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[ThoughtyLogger]) -> ThoughtyLogger:
    """Return ``logger``, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
