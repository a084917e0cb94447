#!/usr/bin/env python3
"""
diary_manager.py
--------------------
Diary lookups needed to route imported entries.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select, update

from thoughty.core.exceptions import ValidationError
from thoughty.database.decorators import handle_db_errors
from thoughty.database.models import Diary
from .base_manager import BaseManager


class DiaryManager(BaseManager):
    """Manages Diary rows of a user."""

    @handle_db_errors
    def get(self, user_id: int, diary_id: int) -> Optional[Diary]:
        stmt = select(Diary).where(Diary.user_id == user_id, Diary.id == diary_id)
        return self.session.scalars(stmt).first()

    @handle_db_errors
    def get_default(self, user_id: int) -> Optional[Diary]:
        """The user's default diary, if one is marked."""
        stmt = select(Diary).where(Diary.user_id == user_id, Diary.is_default.is_(True))
        return self.session.scalars(stmt).first()

    @handle_db_errors
    def create(
        self,
        user_id: int,
        name: str,
        icon: Optional[str] = None,
        is_default: bool = False,
    ) -> Diary:
        """
        Create a diary. Marking it default clears the flag on the others.

        Raises:
            ValidationError: If the name is blank
        """
        if not name or not name.strip():
            raise ValidationError("Diary name is required")

        if is_default:
            self.session.execute(
                update(Diary).where(Diary.user_id == user_id).values(is_default=False)
            )

        diary = Diary(user_id=user_id, name=name.strip(), icon=icon, is_default=is_default)
        self.session.add(diary)
        self.session.flush()
        return diary
