"""Validation helpers shared by the domain services."""

from fitness_tracker.domain.errors import InvalidArgumentError

DEFAULT_SORT_FIELD = "id"

_SORT_ALIASES = {
    "firstname": "first_name",
    "first_name": "first_name",
    "first": "first_name",
    "lastname": "last_name",
    "last_name": "last_name",
    "last": "last_name",
    "email": "email",
    "mail": "email",
    "birthdate": "birthdate",
    "birth_date": "birthdate",
    "birth": "birthdate",
    "dob": "birthdate",
    "id": "id",
}


def require_text(value: str | None, label: str) -> str:
    """Return the value when it is non-blank, otherwise raise."""
    if value is None or not value.strip():
        raise InvalidArgumentError(f"{label} is required")
    return value


def validate_email_format(email: str) -> None:
    """Reject emails without an ``@``."""
    if "@" not in email:
        raise InvalidArgumentError("Invalid email format")


def validate_page_request(page: int, size: int) -> None:
    """Check pagination bounds."""
    if page < 0:
        raise InvalidArgumentError("Page index must not be less than zero")
    if size < 1:
        raise InvalidArgumentError("Page size must not be less than one")


def normalize_sort_field(sort_by: str | None) -> str:
    """Map a user supplied sort key onto a user attribute name.

    Matching is case-insensitive and tolerant of surrounding whitespace.
    A missing or blank key sorts by id.
    """
    if sort_by is None or not sort_by.strip():
        return DEFAULT_SORT_FIELD
    field = _SORT_ALIASES.get(sort_by.strip().lower())
    if field is None:
        raise InvalidArgumentError(f"Invalid sort field: {sort_by}")
    return field
