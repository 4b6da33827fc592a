"""Category domain service."""

from typing import Optional

from loguru import logger

from worklog.database.base import Database
from worklog.domain.entities import Category
from worklog.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_category_name,
)


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _clean_name(self, name: Optional[str]) -> str:
        if name is None or not name.strip():
            raise ValidationError("Category name cannot be empty")
        return name.strip()

    def _require(self, category_id: int) -> Category:
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def create_category(self, name: str) -> int:
        """Create a category at the end of the sort order.

        Args:
            name: Category name (surrounding whitespace is trimmed)

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If a category with the same name exists
        """
        name = self._clean_name(name)
        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(duplicate_category_name(name))

        max_order = self.db.get_max_category_sort_order()
        sort_order = 0 if max_order is None else max_order + 1
        category_id = self.db.create_category(name=name, sort_order=sort_order)
        logger.info("Created category {} ({})", category_id, name)
        return category_id

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(category_id)

    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name."""
        return self.db.get_category_by_name(name.strip())

    def list_categories(self) -> list[Category]:
        """List categories in display order."""
        return self.db.list_categories()

    def rename_category(self, category_id: int, name: str) -> None:
        """Rename a category.

        Raises:
            NotFoundError: If the category doesn't exist
            ValidationError: If the name is empty
            ConflictError: If another category already uses the name
        """
        self._require(category_id)
        name = self._clean_name(name)
        existing = self.db.get_category_by_name(name)
        if existing is not None and existing.id != category_id:
            raise ConflictError(duplicate_category_name(name))
        self.db.update_category(category_id, name=name)

    def move_category(self, category_id: int, sort_order: int) -> None:
        """Set a category's sort order.

        Raises:
            NotFoundError: If the category doesn't exist
            ValidationError: If the sort order is negative
        """
        self._require(category_id)
        if sort_order < 0:
            raise ValidationError("Sort order must be zero or positive")
        self.db.update_category(category_id, sort_order=sort_order)

    def delete_category(self, category_id: int) -> int:
        """Delete a category. Its entries are kept as uncategorized.

        Returns:
            Number of entries that became uncategorized

        Raises:
            NotFoundError: If the category doesn't exist
        """
        self._require(category_id)
        orphaned = self.db.get_category_entry_count(category_id)
        self.db.delete_category(category_id)
        logger.info("Deleted category {} ({} entries uncategorized)", category_id, orphaned)
        return orphaned

    def category_names(self) -> dict[int, str]:
        """Return a lookup of category ID to display name."""
        return {category.id: category.name for category in self.db.list_categories()}
