"""Domain models for users."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class User:
    """Represents a user stored in the database."""

    first_name: str
    last_name: str
    birthdate: date
    email: str
    id: int | None = None


@dataclass(frozen=True)
class UserPayload:
    """User fields supplied by a caller; ``None`` means not provided."""

    first_name: str | None = None
    last_name: str | None = None
    birthdate: date | None = None
    email: str | None = None
    id: int | None = None
