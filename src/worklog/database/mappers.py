"""Mapper functions to convert between domain models and SQLAlchemy models.

SQLite keeps datetimes without a zone. Everything is written as naive UTC and
comes back out of these mappers as aware UTC datetimes.
"""

from datetime import datetime, UTC
from typing import Optional

from worklog.domain import entities as domain
from worklog.database.models import (
    Category as ORMCategory,
    TimeEntry as ORMTimeEntry,
    TimerState as ORMTimerState,
)


def to_storage(value: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to naive UTC for storage. Naive input is taken as UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def from_storage(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a stored naive datetime."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        sort_order=orm_category.sort_order,
        created_at=from_storage(orm_category.created_at),
        updated_at=from_storage(orm_category.updated_at),
    )


def time_entry_to_domain(orm_entry: ORMTimeEntry) -> domain.TimeEntry:
    """Convert SQLAlchemy TimeEntry model to domain TimeEntry entity."""
    return domain.TimeEntry(
        id=orm_entry.id,
        duration=orm_entry.duration,
        category_id=orm_entry.category_id,
        memo=orm_entry.memo,
        started_at=from_storage(orm_entry.started_at),
        created_at=from_storage(orm_entry.created_at),
        updated_at=from_storage(orm_entry.updated_at),
    )


def timer_state_to_domain(orm_state: Optional[ORMTimerState]) -> domain.TimerState:
    """Convert the stored timer row to a domain TimerState (idle when absent)."""
    if orm_state is None:
        return domain.TimerState()
    return domain.TimerState(
        status=domain.TimerStatus(orm_state.status),
        category_id=orm_state.category_id,
        memo=orm_state.memo,
        started_at=from_storage(orm_state.started_at),
        accumulated_seconds=orm_state.accumulated_seconds,
        resumed_at=from_storage(orm_state.resumed_at),
    )
