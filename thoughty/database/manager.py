#!/usr/bin/env python3
"""
manager.py
--------------------
Database manager for Thoughty.

Provides the ThoughtyDB class for interacting with the SQLite database:
    - Initialization of the engine and sessionmaker
    - Schema creation from the ORM models
    - Transactional session scope with logging
    - Entity managers bound to the active session

Usage:
    db = ThoughtyDB("~/path/to/thoughty.db")
    with db.session_scope() as session:
        entries = db.entries.list_for_user(user_id=1)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

# --- Third party ---
from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.orm import Session, sessionmaker

# --- Local imports ---
from thoughty.core.exceptions import DatabaseError
from thoughty.core.logging_manager import ThoughtyLogger, safe_logger
from .models import Base
from .managers import DiaryManager, EntryManager, SettingManager


class ThoughtyDB:
    """
    Main database manager.

    Attributes:
        db_path (Path): Filesystem path to the SQLite database file.
        engine (Engine): SQLAlchemy engine instance.
        SessionLocal (sessionmaker): SQLAlchemy session factory.
        logger (ThoughtyLogger | None): Logger for database activity.
    """

    def __init__(
        self,
        db_path: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize database engine and session factory.

        Args:
            db_path: Path to the SQLite file (created if missing).
            log_dir: Directory for log files (optional)
        """
        self.db_path = Path(db_path).expanduser().resolve()

        if log_dir:
            self.logger: Optional[ThoughtyLogger] = ThoughtyLogger(
                Path(log_dir).expanduser().resolve() / "system",
                component_name="database",
            )
        else:
            self.logger = None

        self._entry_manager: Optional[EntryManager] = None
        self._setting_manager: Optional[SettingManager] = None
        self._diary_manager: Optional[DiaryManager] = None

        self._setup_engine()

    def _setup_engine(self) -> None:
        """Initialize database engine, session factory and schema."""
        try:
            safe_logger(self.logger).log_operation(
                "database_init_start", {"db_path": str(self.db_path)}
            )

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self.engine: Engine = create_engine(
                f"sqlite:///{self.db_path}",
                echo=False,
                pool_pre_ping=True,
            )

            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
            )

            self.initialize_schema()

            safe_logger(self.logger).log_operation("database_init_complete", {"success": True})

        except Exception as e:
            safe_logger(self.logger).log_error(e, {"operation": "database_init"})
            raise DatabaseError(f"Database initialization failed: {e}") from e

    def initialize_schema(self) -> None:
        """Create any missing tables from the ORM models."""
        existing = set(inspect(self.engine).get_table_names())
        Base.metadata.create_all(bind=self.engine)

        created = sorted(set(Base.metadata.tables) - existing)
        if created:
            safe_logger(self.logger).log_operation(
                "tables_created", {"tables": created}
            )

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around operations with logging.

        Entity managers bound to the session are available through
        ``db.entries``, ``db.settings`` and ``db.diaries`` while the scope
        is open.
        """
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

        self._entry_manager = EntryManager(session, self.logger)
        self._setting_manager = SettingManager(session, self.logger)
        self._diary_manager = DiaryManager(session, self.logger)

        safe_logger(self.logger).log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            safe_logger(self.logger).log_debug("session_commit", {"session_id": session_id})

        except Exception as e:
            session.rollback()
            safe_logger(self.logger).log_error(
                e, {"operation": "session_rollback", "session_id": session_id}
            )
            raise
        finally:
            self._entry_manager = None
            self._setting_manager = None
            self._diary_manager = None

            session.close()
            safe_logger(self.logger).log_debug("session_close", {"session_id": session_id})

    def dispose(self) -> None:
        """Release pooled connections and log files."""
        self.engine.dispose()
        if self.logger:
            self.logger.close()

    # ---- Managers ----
    @property
    def entries(self) -> EntryManager:
        """
        Access EntryManager for the active session.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._entry_manager is None:
            raise DatabaseError(
                "EntryManager requires active session. Use within session_scope."
            )
        return self._entry_manager

    @property
    def settings(self) -> SettingManager:
        """
        Access SettingManager for the active session.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._setting_manager is None:
            raise DatabaseError(
                "SettingManager requires active session. Use within session_scope."
            )
        return self._setting_manager

    @property
    def diaries(self) -> DiaryManager:
        """
        Access DiaryManager for the active session.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._diary_manager is None:
            raise DatabaseError(
                "DiaryManager requires active session. Use within session_scope."
            )
        return self._diary_manager
