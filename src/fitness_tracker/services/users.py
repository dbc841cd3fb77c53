"""User-related business logic."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol

from fitness_tracker.domain.errors import InvalidArgumentError
from fitness_tracker.domain.users import User, UserPayload
from fitness_tracker.services.validation import (
    normalize_sort_field,
    require_text,
    validate_email_format,
    validate_page_request,
)

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with the given id, if present."""

    def find_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, if present."""

    def find_by_email_containing(self, fragment: str) -> list[User]:
        """Return users whose email contains the fragment, ignoring case."""

    def find_by_birthdate_before(self, day: date) -> list[User]:
        """Return users born strictly before the given day."""

    def find_all(self) -> list[User]:
        """Return every user ordered by id."""

    def find_all_paged(
        self, page: int, size: int, sort_field: str, ascending: bool
    ) -> list[User]:
        """Return one page of users sorted by the given attribute."""

    def save(self, user: User) -> User:
        """Insert a user without id or update an existing one."""

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user if it exists."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, payload: UserPayload) -> User:
        """Validate and persist a new user."""
        _logger.info("Creating user email=%s", payload.email)
        if payload.id is not None:
            raise InvalidArgumentError(
                "User already has an ID, create is not permitted"
            )
        first_name = require_text(payload.first_name, "First name")
        last_name = require_text(payload.last_name, "Last name")
        if payload.birthdate is None:
            raise InvalidArgumentError("Birthdate is required")
        email = require_text(payload.email, "Email")
        validate_email_format(email)
        if self.repository.find_by_email(email) is not None:
            raise InvalidArgumentError(f"Email is already in use: {email}")

        return self.repository.save(
            User(
                first_name=first_name,
                last_name=last_name,
                birthdate=payload.birthdate,
                email=email,
            )
        )

    def update_user(self, user_id: int, payload: UserPayload) -> User | None:
        """Apply the provided fields to an existing user.

        Returns ``None`` when no user has the given id.
        """
        _logger.info("Updating user id=%s", user_id)
        if payload.id is not None and payload.id != user_id:
            raise InvalidArgumentError("User ID in the path and body must match")

        existing = self.repository.find_by_id(user_id)
        if existing is None:
            _logger.debug("User id=%s not found", user_id)
            return None

        self._validate_email_change(existing, payload.email)
        return self.repository.save(_merge(existing, payload))

    def remove_user(self, user_id: int) -> None:
        """Delete a user; unknown ids are ignored."""
        _logger.info("Removing user id=%s", user_id)
        self.repository.delete_by_id(user_id)

    def get_user(self, user_id: int) -> User | None:
        """Return a user by id, if present."""
        _logger.debug("Fetching user id=%s", user_id)
        return self.repository.find_by_id(user_id)

    def get_user_by_email(self, email: str) -> User | None:
        """Return a user by exact email, if present."""
        _logger.debug("Fetching user email=%s", email)
        return self.repository.find_by_email(email)

    def find_users_by_email(self, fragment: str) -> list[User]:
        """Search users by a case-insensitive email fragment."""
        _logger.debug("Searching users by email fragment=%s", fragment)
        return self.repository.find_by_email_containing(fragment)

    def find_users_older_than(self, day: date) -> list[User]:
        """Return users born before the given day."""
        _logger.debug("Finding users born before %s", day)
        return self.repository.find_by_birthdate_before(day)

    def find_all_users(self) -> list[User]:
        """Return every user."""
        return self.repository.find_all()

    def find_users_paginated(
        self, page: int, size: int, sort_by: str | None, ascending: bool = True
    ) -> list[User]:
        """Return one page of users sorted by a normalized field."""
        _logger.debug(
            "Fetching users page=%s size=%s sort_by=%s ascending=%s",
            page,
            size,
            sort_by,
            ascending,
        )
        validate_page_request(page, size)
        sort_field = normalize_sort_field(sort_by)
        return self.repository.find_all_paged(page, size, sort_field, ascending)

    def _validate_email_change(self, existing: User, email: str | None) -> None:
        if email is None or email == existing.email:
            return
        validate_email_format(email)
        owner = self.repository.find_by_email(email)
        if owner is not None and owner.id != existing.id:
            raise InvalidArgumentError(f"Email is already in use: {email}")


def _merge(existing: User, payload: UserPayload) -> User:
    """Overwrite only the fields the payload provides."""
    changes = {
        name: value
        for name, value in (
            ("first_name", payload.first_name),
            ("last_name", payload.last_name),
            ("birthdate", payload.birthdate),
            ("email", payload.email),
        )
        if value is not None
    }
    return replace(existing, **changes)
