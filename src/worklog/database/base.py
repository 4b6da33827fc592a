"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from worklog.domain.entities import Category, TimeEntry, TimerState


class Database(ABC):
    """Abstract database interface for worklog.

    Datetimes passed in may be aware or naive; naive values are taken as UTC.
    Datetimes returned are aware UTC.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str, sort_order: int = 0) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by exact name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories ordered by sort order."""
        pass

    @abstractmethod
    def get_max_category_sort_order(self) -> Optional[int]:
        """Get the highest sort order in use, or None when there are no categories."""
        pass

    @abstractmethod
    def update_category(
        self, category_id: int, name: Optional[str] = None, sort_order: Optional[int] = None
    ) -> None:
        """Update category fields that are not None."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category. Its time entries become uncategorized."""
        pass

    @abstractmethod
    def get_category_entry_count(self, category_id: int) -> int:
        """Get count of time entries assigned to a category."""
        pass

    # Time entry operations
    @abstractmethod
    def create_time_entry(
        self,
        duration: int,
        category_id: Optional[int] = None,
        memo: Optional[str] = None,
        started_at: Optional[datetime] = None,
    ) -> int:
        """Create a time entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_time_entry(self, entry_id: int) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        pass

    @abstractmethod
    def update_time_entry(
        self,
        entry_id: int,
        duration: Optional[int] = None,
        category_id: Optional[int] = None,
        memo: Optional[str] = None,
        started_at: Optional[datetime] = None,
        update_category: bool = False,
        update_memo: bool = False,
    ) -> None:
        """Update time entry fields.

        Args:
            update_category: If True, update category_id even if it's None (to clear it)
            update_memo: If True, update memo even if it's None (to clear it)
        """
        pass

    @abstractmethod
    def delete_time_entry(self, entry_id: int) -> None:
        """Delete a time entry."""
        pass

    @abstractmethod
    def list_time_entries(
        self,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
        category_id: Optional[int] = None,
        oldest_first: bool = False,
    ) -> list[TimeEntry]:
        """List time entries, newest first.

        Args:
            created_from: Optional inclusive lower bound on created_at
            created_to: Optional inclusive upper bound on created_at
            category_id: Optional category ID filter
            oldest_first: Return entries in creation order instead
        """
        pass

    # Timer operations
    @abstractmethod
    def get_timer_state(self) -> TimerState:
        """Get the stored timer state (idle when none is stored)."""
        pass

    @abstractmethod
    def save_timer_state(self, state: TimerState) -> None:
        """Replace the stored timer state."""
        pass
