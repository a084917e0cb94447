"""
Tests for logging_manager module.

Tests the ThoughtyLogger file output, the safe_logger function and the
NullLogger class that provide null-safe logging throughout the codebase.
"""
import pytest
import click
from unittest.mock import MagicMock

from thoughty.core.cli import ImportStats
from thoughty.core.exceptions import ImportLimitError
from thoughty.core.logging_manager import (
    NullLogger,
    ThoughtyLogger,
    format_details,
    handle_cli_error,
    safe_logger,
)


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_null_logger_methods_no_op(self):
        """NullLogger logging methods do nothing."""
        logger = NullLogger()
        logger.log_operation("test_op", {"key": "value"})
        logger.log_error(ValueError("test error"), {"context": "test"})
        logger.log_debug("debug message", {"key": "value"})
        logger.log_info("info message")
        logger.log_warning("warning message")
        logger.log_stats("import", object())

    def test_null_logger_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error returns the formatted error string."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "❌ ValueError: test error"


class TestFormatDetails:
    """Tests for record formatting."""

    def test_with_details(self):
        """Details are appended as JSON."""
        assert format_details("OPERATION", "saved", {"n": 1}) == 'OPERATION - saved: {"n": 1}'

    def test_without_details(self):
        """Empty details are omitted."""
        assert format_details("DEBUG", "start") == "DEBUG - start"
        assert format_details("DEBUG", "start", {}) == "DEBUG - start"

    def test_non_ascii_kept(self):
        """Journal text is logged readably."""
        assert "café" in format_details("INFO", "tag", {"tag": "café"})


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_safe_logger_returns_logger_when_provided(self):
        """A real logger is passed through."""
        mock_logger = MagicMock(spec=ThoughtyLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_safe_logger_returns_null_logger_when_none(self):
        """None becomes the shared NullLogger."""
        assert isinstance(safe_logger(None), NullLogger)
        assert safe_logger(None) is safe_logger(None)


class TestThoughtyLogger:
    """Tests for ThoughtyLogger file output."""

    @pytest.fixture
    def logger(self, log_dir):
        """Logger writing into a temporary directory."""
        logger = ThoughtyLogger(log_dir, component_name="test_component")
        yield logger
        logger.close()

    def test_creates_log_files(self, logger, log_dir):
        """Component and error logs are created."""
        logger.log_operation("something", {"n": 1})
        assert (log_dir / "test_component.log").exists()
        assert (log_dir / "errors.log").exists()

    def test_operation_written_as_json(self, logger, log_dir):
        """Operations are logged with JSON details."""
        logger.log_operation("import_complete", {"entries": 3})
        logger.close()
        text = (log_dir / "test_component.log").read_text(encoding="utf-8")
        assert 'OPERATION - import_complete: {"entries": 3}' in text

    def test_errors_go_to_error_log(self, logger, log_dir):
        """Errors and their context land in errors.log."""
        logger.log_error(ValueError("boom"), {"operation": "import"})
        logger.close()
        text = (log_dir / "errors.log").read_text(encoding="utf-8")
        assert "ERROR - ValueError: boom" in text
        assert "operation=import" in text

    def test_stats_written(self, logger, log_dir):
        """Stats are logged with their counters."""
        logger.log_stats("import", ImportStats(total_processed=2, entries_imported=2))
        logger.close()
        text = (log_dir / "test_component.log").read_text(encoding="utf-8")
        assert "STATS - import:" in text
        assert '"entries_imported": 2' in text

    def test_warnings_not_in_error_log(self, logger, log_dir):
        """Only errors reach errors.log."""
        logger.log_warning("careful")
        logger.close()
        assert "careful" not in (log_dir / "errors.log").read_text(encoding="utf-8")
        assert "WARNING - careful" in (log_dir / "test_component.log").read_text(encoding="utf-8")

    def test_second_instance_replaces_handlers(self, logger, log_dir):
        """A new logger for the same component does not duplicate handlers."""
        again = ThoughtyLogger(log_dir, component_name="test_component")
        try:
            assert len(again.main_logger.handlers) == 2
            assert len(again.error_logger.handlers) == 1
        finally:
            again.close()

    def test_log_cli_error_format(self, logger):
        """CLI errors are formatted with their type."""
        message = logger.log_cli_error(ImportLimitError("File too large"))
        assert message == "❌ ImportLimitError: File too large"


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_exits_with_code(self):
        """The command exits with the given code."""
        ctx = click.Context(click.Command("test"), obj={"logger": None})
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("bad"), "test_op", exit_code=3)
        assert exc_info.value.code == 3

    def test_uses_context_logger(self):
        """The error is logged through the context logger."""
        mock_logger = MagicMock(spec=ThoughtyLogger)
        mock_logger.log_cli_error.return_value = "❌ ValueError: bad"
        ctx = click.Context(click.Command("test"), obj={"logger": mock_logger})

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ValueError("bad"), "export", {"file": "x.txt"})

        _, context = mock_logger.log_cli_error.call_args[0][:2]
        assert context == {"operation": "export", "file": "x.txt"}

    def test_missing_obj(self):
        """Works when no context object was set."""
        ctx = click.Context(click.Command("test"))
        with pytest.raises(SystemExit):
            handle_cli_error(ctx, ValueError("bad"), "test_op")
