"""
Tests for the exception hierarchy.
"""
import pytest

from thoughty.core.exceptions import (
    DatabaseError,
    ExportError,
    FormatConfigError,
    ImportLimitError,
    ValidationError,
)


class TestHierarchy:
    """Callers can catch errors by family."""

    @pytest.mark.parametrize("error_class", [ImportLimitError, FormatConfigError])
    def test_validation_family(self, error_class):
        """Limit and format errors are validation errors."""
        assert issubclass(error_class, ValidationError)
        assert not issubclass(error_class, DatabaseError)

    def test_export_error_is_database_error(self):
        """Export failures are database-side errors."""
        assert issubclass(ExportError, DatabaseError)

    def test_message_kept(self):
        """Messages are carried unchanged."""
        assert str(ImportLimitError("File too large")) == "File too large"
