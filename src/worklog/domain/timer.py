"""Timer domain service.

The timer moves idle -> running <-> paused and ends by saving a time entry or
being discarded. Times are passed in explicitly and must be timezone-aware.
"""

from dataclasses import replace
from datetime import datetime
from typing import Optional

from loguru import logger

from worklog.database.base import Database
from worklog.domain.entities import TimerState, TimerStatus
from worklog.domain.errors import (
    NotFoundError,
    TimerStateError,
    ValidationError,
    category_not_found,
    timer_transition_blocked,
)
from worklog.domain.time_entry import TimeEntryService


def elapsed_seconds(state: TimerState, now: datetime) -> int:
    """Return whole seconds worked so far, including the current running stretch."""
    elapsed = state.accumulated_seconds
    if state.status == TimerStatus.RUNNING and state.resumed_at is not None:
        elapsed += max(0, int((now - state.resumed_at).total_seconds()))
    return elapsed


class TimerService:
    """Service driving the single work timer."""

    def __init__(self, db: Database):
        """Initialize timer service.

        Args:
            db: Database instance
        """
        self.db = db

    def _expect(self, state: TimerState, action: str, *allowed: TimerStatus) -> None:
        if state.status not in allowed:
            raise TimerStateError(
                timer_transition_blocked(
                    action, state.status.value, tuple(s.value for s in allowed)
                )
            )

    def get_state(self) -> TimerState:
        """Return the current timer state."""
        return self.db.get_timer_state()

    def elapsed(self, now: datetime) -> int:
        """Return seconds worked on the current timer."""
        return elapsed_seconds(self.db.get_timer_state(), now)

    def start(self, category_id: Optional[int], now: datetime, memo: Optional[str] = None) -> TimerState:
        """Start a new timer.

        Raises:
            TimerStateError: If a timer is already running or paused
            ValidationError: If no category is given
            NotFoundError: If the category doesn't exist
        """
        state = self.db.get_timer_state()
        self._expect(state, "start", TimerStatus.IDLE)
        if category_id is None:
            raise ValidationError("A category is required to start the timer")
        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        new_state = TimerState(
            status=TimerStatus.RUNNING,
            category_id=category_id,
            memo=memo or None,
            started_at=now,
            accumulated_seconds=0,
            resumed_at=now,
        )
        self.db.save_timer_state(new_state)
        logger.debug("Timer started at {}", now.isoformat())
        return new_state

    def pause(self, now: datetime) -> TimerState:
        """Pause the running timer."""
        state = self.db.get_timer_state()
        self._expect(state, "pause", TimerStatus.RUNNING)
        new_state = replace(
            state,
            status=TimerStatus.PAUSED,
            accumulated_seconds=elapsed_seconds(state, now),
            resumed_at=None,
        )
        self.db.save_timer_state(new_state)
        return new_state

    def resume(self, now: datetime) -> TimerState:
        """Resume a paused timer."""
        state = self.db.get_timer_state()
        self._expect(state, "resume", TimerStatus.PAUSED)
        new_state = replace(state, status=TimerStatus.RUNNING, resumed_at=now)
        self.db.save_timer_state(new_state)
        return new_state

    def save(self, now: datetime, memo: Optional[str] = None) -> int:
        """Stop the timer and record the elapsed time as a time entry.

        Args:
            now: Current time
            memo: Optional memo replacing the one given at start

        Returns:
            ID of the created time entry

        Raises:
            TimerStateError: If the timer is idle
            ValidationError: If no time has elapsed
        """
        state = self.db.get_timer_state()
        self._expect(state, "save", TimerStatus.RUNNING, TimerStatus.PAUSED)
        duration = elapsed_seconds(state, now)
        if duration <= 0:
            raise ValidationError("No time recorded on the timer")

        entry_id = TimeEntryService(self.db).create_entry(
            duration=duration,
            category_id=state.category_id,
            memo=memo if memo is not None else state.memo,
            started_at=state.started_at,
        )
        self.db.save_timer_state(TimerState())
        return entry_id

    def discard(self) -> None:
        """Reset the timer without saving."""
        self.db.save_timer_state(TimerState())
