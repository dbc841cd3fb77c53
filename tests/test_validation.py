"""Tests for shared validation helpers."""

import pytest

from fitness_tracker.domain.errors import InvalidArgumentError
from fitness_tracker.services.validation import (
    normalize_sort_field,
    require_text,
    validate_email_format,
    validate_page_request,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("firstName", "first_name"),
        ("FIRST", "first_name"),
        ("last_name", "last_name"),
        ("Last", "last_name"),
        ("mail", "email"),
        (" dob ", "birthdate"),
        ("birth_date", "birthdate"),
        ("ID", "id"),
        ("", "id"),
        (None, "id"),
    ],
)
def test_normalize_sort_field(raw: str | None, expected: str) -> None:
    assert normalize_sort_field(raw) == expected


def test_normalize_sort_field_rejects_unknown() -> None:
    with pytest.raises(InvalidArgumentError, match="bogus"):
        normalize_sort_field("bogus")


def test_validate_page_request_bounds() -> None:
    validate_page_request(0, 1)
    with pytest.raises(InvalidArgumentError):
        validate_page_request(-1, 20)
    with pytest.raises(InvalidArgumentError):
        validate_page_request(0, 0)


def test_require_text() -> None:
    assert require_text("Ann", "First name") == "Ann"
    with pytest.raises(InvalidArgumentError, match="First name is required"):
        require_text("  ", "First name")


def test_validate_email_format() -> None:
    validate_email_format("a@x.com")
    with pytest.raises(InvalidArgumentError):
        validate_email_format("ax.com")
