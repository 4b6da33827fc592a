"""Tests for Database interface returning domain models."""

import pytest
from datetime import datetime, timezone, timedelta, UTC

from worklog.database.factories import DB_PATH_ENV, resolve_database_path
from worklog.database.mappers import from_storage, timer_state_to_domain, to_storage
from worklog.domain import entities
from worklog.domain.errors import NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_category_returns_domain_model(self, temp_db):
        """Test that get_category returns a domain Category entity."""
        category_id = temp_db.create_category(name="Development", sort_order=3)

        category = temp_db.get_category(category_id)

        assert isinstance(category, entities.Category)
        assert category.name == "Development"
        assert category.sort_order == 3
        assert category.created_at.tzinfo is not None

    def test_max_sort_order(self, temp_db):
        assert temp_db.get_max_category_sort_order() is None

        temp_db.create_category(name="A", sort_order=4)
        temp_db.create_category(name="B", sort_order=2)

        assert temp_db.get_max_category_sort_order() == 4

    def test_time_entry_round_trips_start_time(self, temp_db):
        """Aware start times come back as the same instant in UTC."""
        tokyo = timezone(timedelta(hours=9))
        started = datetime(2024, 1, 15, 9, 0, tzinfo=tokyo)

        entry_id = temp_db.create_time_entry(duration=60, started_at=started)
        entry = temp_db.get_time_entry(entry_id)

        assert isinstance(entry, entities.TimeEntry)
        assert entry.started_at == started
        assert entry.started_at.tzinfo is UTC

    def test_list_time_entries_order(self, temp_db):
        first = temp_db.create_time_entry(duration=60)
        second = temp_db.create_time_entry(duration=60)

        assert [e.id for e in temp_db.list_time_entries()] == [second, first]
        assert [e.id for e in temp_db.list_time_entries(oldest_first=True)] == [first, second]

    def test_update_missing_entry(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_time_entry(3, duration=60)

    def test_delete_missing_category(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.delete_category(3)

    def test_timer_state_defaults_to_idle(self, temp_db):
        assert temp_db.get_timer_state() == entities.TimerState()

    def test_save_timer_state(self, temp_db):
        category_id = temp_db.create_category(name="Development")
        now = datetime(2024, 1, 15, 9, 0, tzinfo=UTC)
        state = entities.TimerState(
            status=entities.TimerStatus.PAUSED,
            category_id=category_id,
            memo="focus",
            started_at=now,
            accumulated_seconds=300,
        )

        temp_db.save_timer_state(state)
        temp_db.save_timer_state(state)

        assert temp_db.get_timer_state() == state


class TestMappers:
    """Tests for datetime storage conversion."""

    def test_to_storage(self):
        value = datetime(2024, 1, 15, 9, 0, tzinfo=timezone(timedelta(hours=-5)))

        assert to_storage(value) == datetime(2024, 1, 15, 14, 0)
        assert to_storage(None) is None

    def test_from_storage(self):
        assert from_storage(datetime(2024, 1, 15, 14, 0)) == datetime(2024, 1, 15, 14, 0, tzinfo=UTC)
        assert from_storage(None) is None

    def test_missing_timer_row(self):
        assert timer_state_to_domain(None).status == entities.TimerStatus.IDLE


class TestFactories:
    """Tests for database path resolution."""

    def test_explicit_path_creates_parent(self, tmp_path):
        target = tmp_path / "nested" / "work.db"

        assert resolve_database_path(str(target)) == target
        assert target.parent.is_dir()

    def test_environment_variable(self, tmp_path, monkeypatch):
        target = tmp_path / "env.db"
        monkeypatch.setenv(DB_PATH_ENV, str(target))

        assert resolve_database_path() == target

    def test_default_under_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv(DB_PATH_ENV, raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert resolve_database_path() == tmp_path / ".worklog" / "worklog.db"
