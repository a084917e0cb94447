"""
Base Classes and Mixins
------------------------

Foundational ORM classes for the Thoughty database.

Classes:
    - Base: Declarative base for all SQLAlchemy models
    - TimestampMixin: created_at / updated_at columns
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime, timezone

# --- Third party ---
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# --- Base ORM class ---
class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Provides access to the metadata object for table creation.
    """

    pass


# --- Timestamps ---
class TimestampMixin:
    """
    Mixin adding creation and modification timestamps.

    Attributes:
        created_at: When the row was created
        updated_at: When the row was last modified
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, doc="Creation timestamp"
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        doc="Last modification timestamp",
    )
