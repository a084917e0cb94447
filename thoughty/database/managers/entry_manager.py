#!/usr/bin/env python3
"""
entry_manager.py
--------------------
Entry queries and creation used by the import/export service.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from sqlalchemy import func, select

from thoughty.core.exceptions import ValidationError
from thoughty.database.decorators import handle_db_errors, log_database_operation
from thoughty.database.models import Entry
from .base_manager import BaseManager


class EntryManager(BaseManager):
    """Manages Entry rows of a user."""

    VISIBILITIES = ("private", "public")

    @handle_db_errors
    def list_for_user(
        self, user_id: int, diary_id: Optional[int] = None
    ) -> List[Entry]:
        """
        Get a user's entries ordered by date then index.

        Args:
            user_id: Owner
            diary_id: Restrict to one diary when given
        """
        stmt = select(Entry).where(Entry.user_id == user_id)
        if diary_id is not None:
            stmt = stmt.where(Entry.diary_id == diary_id)
        stmt = stmt.order_by(Entry.date.asc(), Entry.index.asc())

        return list(self._execute_with_retry(lambda: self.session.scalars(stmt).all()))

    @handle_db_errors
    def count_on_date(self, user_id: int, entry_date: Any) -> int:
        """Number of the user's entries on a date, across all diaries."""
        day = self._to_date(entry_date)
        stmt = (
            select(func.count(Entry.id))
            .where(Entry.user_id == user_id)
            .where(Entry.date == day)
        )
        return int(self._execute_with_retry(lambda: self.session.scalar(stmt)) or 0)

    @handle_db_errors
    @log_database_operation("create_entry")
    def create(
        self,
        user_id: int,
        entry_date: Any,
        content: str,
        tags: Optional[Sequence[str]] = None,
        index: Optional[int] = None,
        diary_id: Optional[int] = None,
        visibility: str = "private",
    ) -> Entry:
        """
        Create an entry.

        When ``index`` is omitted the entry is appended after the user's
        existing entries of that date.

        Raises:
            ValidationError: For invalid dates, non-text content or an
                unknown visibility
            DatabaseError: If the insert fails
        """
        if not isinstance(content, str):
            raise ValidationError("Content must be a string")
        if visibility not in self.VISIBILITIES:
            raise ValidationError(f"Invalid visibility: {visibility!r}")

        day = self._to_date(entry_date)
        if index is None:
            index = self.count_on_date(user_id, day) + 1

        entry = Entry(
            user_id=user_id,
            diary_id=diary_id,
            date=day,
            index=index,
            tags=list(tags or []),
            content=content,
            visibility=visibility,
        )
        self.session.add(entry)
        self.session.flush()
        return entry
