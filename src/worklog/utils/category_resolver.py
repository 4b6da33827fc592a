"""Utility for resolving category names to IDs."""

from worklog.domain.category import CategoryService
from worklog.domain.errors import NotFoundError, category_name_not_found, category_not_found


def resolve_category(category_service: CategoryService, category: str | int) -> int:
    """Resolve category name or ID to category ID.

    A category whose name is itself a number is found by name when no category
    has that ID.

    Args:
        category_service: CategoryService instance
        category: Category name (str) or ID (int or string representation of int)

    Returns:
        Category ID

    Raises:
        NotFoundError: If category is not found
    """
    # If it's already an integer, use it as ID
    if isinstance(category, int):
        if category_service.get_category(category) is None:
            raise NotFoundError(category_not_found(category))
        return category

    name = category.strip()
    if name.isdigit() and category_service.get_category(int(name)) is not None:
        return int(name)

    found = category_service.get_category_by_name(name)
    if found is None:
        raise NotFoundError(category_name_not_found(name))
    return found.id
