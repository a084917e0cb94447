#!/usr/bin/env python3
"""
Thoughty Database Package
---------------------------
Persistence for journal entries, diaries and user settings.

Modules:
    - manager: ThoughtyDB engine/session handling
    - models: SQLAlchemy ORM models
    - managers: Per-model query helpers
    - decorators: Error translation and operation logging
"""

from .manager import ThoughtyDB
from thoughty.core.exceptions import DatabaseError, ValidationError
from .decorators import handle_db_errors, log_database_operation

__all__ = [
    "ThoughtyDB",
    "DatabaseError",
    "ValidationError",
    "handle_db_errors",
    "log_database_operation",
]
