#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing shared session handling for entity managers.

Key Features:
    - Retry logic for SQLite lock handling
    - Common normalization of dates
    - Consistent logging through safe_logger

Usage:
    class EntryManager(BaseManager):
        def list_for_user(self, user_id: int) -> List[Entry]:
            ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from abc import ABC
from datetime import date
from typing import Any, Callable, Optional

# --- Third party imports ---
from sqlalchemy.orm import Session
from sqlalchemy.exc import OperationalError

# --- Local imports ---
from thoughty.core.exceptions import DatabaseError, ValidationError
from thoughty.core.logging_manager import ThoughtyLogger, safe_logger
from thoughty.utils.dates import to_iso_date


class BaseManager(ABC):
    """
    Abstract base manager shared by all entity managers.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
    """

    def __init__(self, session: Session, logger: Optional[ThoughtyLogger] = None):
        self.session = session
        self.logger = logger

    def _execute_with_retry(
        self,
        operation: Callable,
        max_retries: int = 3,
        retry_delay: float = 0.1,
    ) -> Any:
        """
        Execute database operation with retry on lock.

        Args:
            operation: Callable that performs the operation
            max_retries: Maximum number of retry attempts
            retry_delay: Base delay between retries (exponential backoff)

        Returns:
            Result of the operation

        Raises:
            OperationalError: If the error is not a lock or retries are exhausted
        """
        for attempt in range(max_retries):
            try:
                return operation()
            except OperationalError as e:
                error_msg = str(e).lower()

                if (
                    "locked" in error_msg or "busy" in error_msg
                ) and attempt < max_retries - 1:
                    wait_time = retry_delay * (2**attempt)

                    safe_logger(self.logger).log_debug(
                        f"Database locked, retrying in {wait_time}s",
                        {"attempt": attempt + 1, "max_retries": max_retries},
                    )

                    time.sleep(wait_time)
                    continue

                raise

        raise DatabaseError("Retry loop completed without success")

    @staticmethod
    def _to_date(value: Any) -> date:
        """
        Coerce a date, datetime or ISO string to a date.

        Raises:
            ValidationError: If the value is not a valid calendar date
        """
        iso = to_iso_date(value)
        try:
            return date.fromisoformat(iso)
        except ValueError as e:
            raise ValidationError(f"Invalid date: {value!r}") from e
