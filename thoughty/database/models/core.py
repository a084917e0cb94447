"""
Core Models
------------

Journal storage models.

Models:
    - Diary: Named grouping of a user's entries
    - Entry: A dated journal entry with per-day index, tags and content
    - Setting: Per-user key/value preference (text-format tokens live here
      under the ``io_`` prefix)

Users are referenced by id only; authentication lives outside this package.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


# ----- Diary Model -----
class Diary(Base, TimestampMixin):
    """
    A named collection of entries belonging to one user.

    Attributes:
        id: Primary key
        user_id: Owner
        name: Display name
        icon: Optional emoji or icon name
        is_default: Whether imports without an explicit diary land here
    """

    __tablename__ = "diaries"
    __table_args__ = (CheckConstraint("name != ''", name="ck_diary_non_empty_name"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(String(20))
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    entries: Mapped[List["Entry"]] = relationship("Entry", back_populates="diary")

    def __repr__(self) -> str:
        return f"<Diary(id={self.id}, name={self.name!r}, default={self.is_default})>"


# ----- Entry Model -----
class Entry(Base, TimestampMixin):
    """
    A journal entry.

    Several entries may share a date; ``index`` orders them within the
    day, starting at 1.

    Attributes:
        id: Primary key
        user_id: Owner
        diary_id: Diary the entry belongs to (optional)
        date: Calendar date of the entry
        index: 1-based position among the user's entries of that date
        tags: Ordered list of tag strings
        content: Entry text
        visibility: 'private' or 'public'
    """

    __tablename__ = "entries"
    __table_args__ = (
        CheckConstraint('"index" >= 1', name="ck_entry_positive_index"),
        CheckConstraint(
            "visibility IN ('private', 'public')", name="ck_entry_visibility"
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    diary_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("diaries.id", ondelete="SET NULL"), nullable=True, index=True
    )
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    index: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    visibility: Mapped[str] = mapped_column(String(10), nullable=False, default="private")

    diary: Mapped[Optional[Diary]] = relationship("Diary", back_populates="entries")

    def __repr__(self) -> str:
        return f"<Entry(id={self.id}, date={self.date}, index={self.index})>"


# ----- Setting Model -----
class Setting(Base, TimestampMixin):
    """
    A user preference stored as a string.

    Attributes:
        id: Primary key
        user_id: Owner
        key: Setting name, unique per user
        value: Setting value
    """

    __tablename__ = "settings"
    __table_args__ = (UniqueConstraint("user_id", "key", name="uq_setting_user_key"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    key: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Setting(user_id={self.user_id}, key={self.key!r})>"
