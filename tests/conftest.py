"""
conftest.py
-----------
Shared pytest fixtures for Thoughty tests.

Provides fixtures for:
- Temporary directories and databases
- Sample journal text in the default format
- Entry record factories
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from thoughty.dataclasses.txt_entry import EntryRecord


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def log_dir(tmp_dir):
    """Directory for log files written during a test."""
    path = tmp_dir / "logs"
    path.mkdir()
    return path


# ----- Sample Journal Content Fixtures -----

SEPARATOR = "-" * 80
SAME_DAY = "*" * 80


@pytest.fixture
def sample_journal_text():
    """Two dates, the first one holding two entries (default tokens, LF)."""
    return "\n".join([
        "",
        "---2024-01-15--[work,ideas]",
        "First entry of the day",
        "",
        "with a second paragraph.",
        "",
        SAME_DAY,
        "",
        "---2--[home]",
        "Evening notes",
        "",
        SEPARATOR,
        "",
        "---2024-01-16--[]",
        "Next day",
        "",
        SEPARATOR,
    ])


@pytest.fixture
def sample_records():
    """Records matching sample_journal_text."""
    return [
        create_record("2024-01-15", 1, ["work", "ideas"],
                      "First entry of the day\n\nwith a second paragraph."),
        create_record("2024-01-15", 2, ["home"], "Evening notes"),
        create_record("2024-01-16", 1, [], "Next day"),
    ]


# ----- Sample Data Factory Functions -----

def create_record(date="2024-01-15", index=1, tags=None, content="Entry text"):
    """Factory for EntryRecords."""
    return EntryRecord(date=date, index=index, tags=list(tags or []), content=content)


# ----- Database Fixtures -----

@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def test_db(test_db_path):
    """
    Create test database instance with schema.

    Returns a ThoughtyDB instance with an initialized schema.
    Database is disposed after the test.
    """
    from thoughty.database.manager import ThoughtyDB

    db = ThoughtyDB(test_db_path)
    yield db
    db.dispose()


@pytest.fixture
def db_session(test_db):
    """
    Create a database session for tests.

    Provides a session with automatic rollback after test.
    """
    with test_db.session_scope() as session:
        yield session
        session.rollback()


@pytest.fixture
def entry_manager(db_session):
    """Create EntryManager instance for testing."""
    from thoughty.database.managers.entry_manager import EntryManager
    return EntryManager(db_session)


@pytest.fixture
def diary_manager(db_session):
    """Create DiaryManager instance for testing."""
    from thoughty.database.managers.diary_manager import DiaryManager
    return DiaryManager(db_session)


@pytest.fixture
def setting_manager(db_session):
    """Create SettingManager instance for testing."""
    from thoughty.database.managers.setting_manager import SettingManager
    return SettingManager(db_session)
