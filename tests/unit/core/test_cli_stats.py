"""
Tests for the CLI statistics classes.
"""
import pytest
from datetime import datetime, timedelta

from thoughty.core.cli import ExportStats, ImportStats, OperationStats


class TestOperationStats:
    """Test the base statistics class."""

    def test_negative_errors_rejected(self):
        """Counters cannot start negative."""
        with pytest.raises(ValueError):
            OperationStats(errors=-1)

    def test_duration_cached(self):
        """Duration is computed once."""
        stats = OperationStats(start_time=datetime.now() - timedelta(seconds=2))
        first = stats.duration()
        assert first >= 2
        assert stats.duration() == first

    def test_to_dict(self):
        """Base dictionary has errors and duration."""
        assert set(OperationStats().to_dict()) == {"errors", "duration"}


class TestImportStats:
    """Test ImportStats."""

    def test_initialization(self):
        """Stats are initialized to zero and successful."""
        stats = ImportStats()
        assert stats.total_processed == 0
        assert stats.entries_imported == 0
        assert stats.entries_skipped == 0
        assert stats.success is True

    def test_errors_mark_failure(self):
        """Any error makes the import unsuccessful."""
        stats = ImportStats(total_processed=2)
        stats.errors += 1
        assert stats.success is False

    def test_summary(self):
        """Summary lists every counter."""
        stats = ImportStats(total_processed=5, entries_imported=3, entries_skipped=2)
        summary = stats.summary()
        assert "5 entries parsed" in summary
        assert "3 imported" in summary
        assert "2 skipped" in summary
        assert "0 errors" in summary

    def test_to_dict(self):
        """Dictionary form includes success and counters."""
        data = ImportStats(total_processed=1, entries_imported=1).to_dict()
        assert data["success"] is True
        assert data["entries_imported"] == 1
        assert data["entries_skipped"] == 0

    def test_negative_counter_rejected(self):
        """Negative counters raise ValueError."""
        with pytest.raises(ValueError, match="entries_skipped"):
            ImportStats(entries_skipped=-1)


class TestExportStats:
    """Test ExportStats."""

    def test_summary(self):
        """Summary lists entries and files."""
        stats = ExportStats(entries_exported=4, files_created=1)
        assert "4 entries exported" in stats.summary()
        assert "1 files created" in stats.summary()

    def test_to_dict(self):
        """Dictionary form includes export counters."""
        data = ExportStats(entries_exported=2).to_dict()
        assert data["entries_exported"] == 2
        assert data["files_created"] == 0
