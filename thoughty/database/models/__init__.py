"""
Database Models Package
------------------------

SQLAlchemy ORM models for the Thoughty database.

- base: Base class and mixins
- core: Diary, Entry, Setting

Usage:
    from thoughty.database.models import Entry, Setting
"""
from .base import Base, TimestampMixin
from .core import Diary, Entry, Setting

__all__ = ["Base", "TimestampMixin", "Diary", "Entry", "Setting"]
