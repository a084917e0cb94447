#!/usr/bin/env python3
"""
setting_manager.py
--------------------
Per-user key/value settings.
"""
from __future__ import annotations

from typing import Dict

from sqlalchemy import select

from thoughty.database.decorators import handle_db_errors
from thoughty.database.models import Setting
from .base_manager import BaseManager


class SettingManager(BaseManager):
    """Reads and writes Setting rows of a user."""

    @handle_db_errors
    def get_prefixed(self, user_id: int, prefix: str) -> Dict[str, str]:
        """
        Get all settings whose key starts with ``prefix``.

        Returns:
            Mapping of key (prefix removed) to value
        """
        stmt = select(Setting).where(Setting.user_id == user_id)
        rows = self._execute_with_retry(lambda: self.session.scalars(stmt).all())
        return {
            row.key[len(prefix):]: row.value
            for row in rows
            if row.key.startswith(prefix)
        }

    @handle_db_errors
    def upsert(self, user_id: int, key: str, value: str) -> Setting:
        """Create the setting or overwrite its value."""
        stmt = select(Setting).where(Setting.user_id == user_id, Setting.key == key)
        setting = self.session.scalars(stmt).first()

        if setting is None:
            setting = Setting(user_id=user_id, key=key, value=value)
            self.session.add(setting)
        else:
            setting.value = value

        self.session.flush()
        return setting
