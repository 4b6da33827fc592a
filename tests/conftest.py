"""Shared pytest fixtures for worklog tests."""

import tempfile
import os
from datetime import datetime

import pytest
from dateutil import tz

from worklog.database.factories import create_sqlite_database
from worklog.domain.entities import TimeEntry
from worklog.domain.category import CategoryService
from worklog.domain.time_entry import TimeEntryService
from worklog.domain.timer import TimerService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def utc():
    """UTC zone so day and hour boundaries do not depend on the machine."""
    return tz.tzutc()


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def entry_service(temp_db):
    """Create a TimeEntryService with a temporary database."""
    return TimeEntryService(temp_db)


@pytest.fixture
def timer_service(temp_db):
    """Create a TimerService with a temporary database."""
    return TimerService(temp_db)


@pytest.fixture
def sample_categories(category_service):
    """Create a few categories and return their IDs by name."""
    return {
        name: category_service.create_category(name)
        for name in ["Development", "Meetings", "Review"]
    }


@pytest.fixture
def make_entry():
    """Build in-memory TimeEntry objects for the pure aggregation functions."""
    counter = iter(range(1, 10_000))

    def _make(duration, category_id=None, started_at=None, created_at=None, memo=None):
        created = created_at or started_at or datetime(2024, 1, 1)
        return TimeEntry(
            id=next(counter),
            duration=duration,
            category_id=category_id,
            memo=memo,
            started_at=started_at,
            created_at=created,
            updated_at=created,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
