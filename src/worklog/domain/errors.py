"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class TimerStateError(ValidationError):
    """Timer operation not allowed in the current timer state."""


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def duplicate_category_name(name: str) -> str:
    """Return message for duplicate category name."""
    return f"Category with name '{name}' already exists"


def time_entry_not_found(entry_id: int) -> str:
    """Return message for missing time entry."""
    return f"Time entry {entry_id} not found"


def invalid_duration(duration: object) -> str:
    """Return message for a non-positive or non-integer duration."""
    return f"Duration must be a positive number of seconds, got {duration!r}"


def invalid_offset(offset: int) -> str:
    """Return message for a negative period offset."""
    return f"Period offset must be zero or positive, got {offset}"


def timer_transition_blocked(action: str, status: str, allowed: tuple[str, ...]) -> str:
    """Return message when a timer action is not allowed in the current state."""
    expected = " or ".join(allowed)
    return f"Cannot {action} timer: timer is {status} (must be {expected})"
