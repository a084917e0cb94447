#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Thoughty project.

The text-format codec itself never raises: it is a forgiving parser meant
for hand-edited files. These exceptions belong to the layers around it
(persistence, import/export service, CLI).

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all database-related errors
    │   └── ExportError - Export operation failures
    └── ValidationError - Data validation failures
        ├── ImportLimitError - Upload size / entry count limits exceeded
        └── FormatConfigError - Unreadable format configuration files

Usage:
    from thoughty.core.exceptions import DatabaseError, ValidationError

    try:
        import_entries(session, user_id, content)
    except ImportLimitError as e:
        click.echo(f"Upload rejected: {e}")
    except DatabaseError as e:
        logger.error(f"Database operation failed: {e}")
"""


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised when database operations fail due to connection issues,
    query errors, integrity violations, or other database problems.
    SQLAlchemy errors are wrapped into this type by ``handle_db_errors``.

    Examples:
        >>> raise DatabaseError("Connection to database failed")
        >>> raise DatabaseError("Data integrity violation: duplicate setting key")
    """

    pass


class ExportError(DatabaseError):
    """
    Exception for export operation failures.

    Raised when writing exported journal text fails:
    - Output directory cannot be created
    - File writing errors

    Examples:
        >>> raise ExportError("Cannot write export file: permission denied")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Missing import content
    - Content that is not text
    - Invalid dates handed to the persistence layer

    Examples:
        >>> raise ValidationError("File content is required")
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
    """

    pass


class ImportLimitError(ValidationError):
    """
    Exception for imports exceeding the configured limits.

    Raised before any entry is persisted when:
    - The uploaded text is larger than the maximum import size
    - The text parses into more entries than allowed per import

    Examples:
        >>> raise ImportLimitError("File too large. Maximum size is 5MB")
    """

    pass


class FormatConfigError(ValidationError):
    """
    Exception for format configuration files that cannot be loaded.

    Raised when a YAML format file:
    - Cannot be read or parsed
    - Does not contain a mapping at the top level
    - Contains non-string token values

    Examples:
        >>> raise FormatConfigError("Format file must contain a mapping")
    """

    pass
