"""
Entity managers for the Thoughty database.

Each manager wraps one model behind a session and an optional logger:
    - EntryManager: entry listing, per-day counts and creation
    - SettingManager: per-user key/value settings
    - DiaryManager: diary lookup and creation
"""
from .base_manager import BaseManager
from .diary_manager import DiaryManager
from .entry_manager import EntryManager
from .setting_manager import SettingManager

__all__ = ["BaseManager", "DiaryManager", "EntryManager", "SettingManager"]
