"""Time entry domain service."""

from datetime import date, datetime, time, tzinfo
from typing import Optional

from dateutil.tz import tzlocal
from loguru import logger

from worklog.database.base import Database
from worklog.domain.entities import TimeEntry
from worklog.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    invalid_duration,
    time_entry_not_found,
)

MANUAL_ENTRY_START = time(9, 0)


def _validate_duration(duration: object) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
        raise ValidationError(invalid_duration(duration))
    return duration


class TimeEntryService:
    """Service for managing time entries."""

    def __init__(self, db: Database):
        """Initialize time entry service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_category(self, category_id: Optional[int]) -> None:
        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

    def create_entry(
        self,
        duration: int,
        category_id: Optional[int],
        memo: Optional[str] = None,
        started_at: Optional[datetime] = None,
    ) -> int:
        """Create a time entry.

        Args:
            duration: Worked time in seconds (must be positive)
            category_id: Category ID, or None for uncategorized
            memo: Optional free-text memo (empty memos are stored as None)
            started_at: When the work started, if known

        Returns:
            Time entry ID

        Raises:
            ValidationError: If the duration is not a positive integer
            NotFoundError: If the category doesn't exist
        """
        duration = _validate_duration(duration)
        self._check_category(category_id)

        entry_id = self.db.create_time_entry(
            duration=duration,
            category_id=category_id,
            memo=memo or None,
            started_at=started_at,
        )
        logger.info("Created time entry {} ({}s, category {})", entry_id, duration, category_id)
        return entry_id

    def create_manual_entry(
        self,
        entry_date: date,
        hours: int,
        minutes: int,
        category_id: Optional[int],
        memo: Optional[str] = None,
        tz: Optional[tzinfo] = None,
        seconds: int = 0,
    ) -> int:
        """Create an entry for work done on ``entry_date``.

        The entry is stamped as starting at 09:00 local time on that date.

        Raises:
            ValidationError: If the parts are negative or add up to nothing
        """
        if hours < 0 or minutes < 0 or seconds < 0:
            raise ValidationError("Hours, minutes and seconds must be zero or positive")
        duration = hours * 3600 + minutes * 60 + seconds
        if duration == 0:
            raise ValidationError("Duration must be greater than zero")

        started_at = datetime.combine(entry_date, MANUAL_ENTRY_START, tzinfo=tz or tzlocal())
        return self.create_entry(
            duration=duration,
            category_id=category_id,
            memo=memo,
            started_at=started_at,
        )

    def get_entry(self, entry_id: int) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        return self.db.get_time_entry(entry_id)

    def list_entries(
        self,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
        category_id: Optional[int] = None,
    ) -> list[TimeEntry]:
        """List time entries newest first, optionally filtered by creation time and category."""
        return self.db.list_time_entries(
            created_from=created_from,
            created_to=created_to,
            category_id=category_id,
        )

    def get_all_entries(self) -> list[TimeEntry]:
        """Return the complete entry collection in creation order."""
        return self.db.list_time_entries(oldest_first=True)

    def update_entry(
        self,
        entry_id: int,
        duration: Optional[int] = None,
        category_id: Optional[int] = None,
        memo: Optional[str] = None,
        started_at: Optional[datetime] = None,
        clear_category: bool = False,
        clear_memo: bool = False,
    ) -> None:
        """Update the provided fields of a time entry.

        Raises:
            NotFoundError: If the entry or the new category doesn't exist
            ValidationError: If the new duration is not a positive integer
        """
        if self.db.get_time_entry(entry_id) is None:
            raise NotFoundError(time_entry_not_found(entry_id))
        if duration is not None:
            _validate_duration(duration)
        self._check_category(category_id)

        self.db.update_time_entry(
            entry_id,
            duration=duration,
            category_id=None if clear_category else category_id,
            memo=None if clear_memo else (memo or None),
            started_at=started_at,
            update_category=clear_category,
            update_memo=clear_memo,
        )

    def delete_entry(self, entry_id: int) -> None:
        """Delete a time entry.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        if self.db.get_time_entry(entry_id) is None:
            raise NotFoundError(time_entry_not_found(entry_id))
        self.db.delete_time_entry(entry_id)
        logger.info("Deleted time entry {}", entry_id)
