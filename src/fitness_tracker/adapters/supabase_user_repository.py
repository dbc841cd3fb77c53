"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from fitness_tracker.domain.users import User
from fitness_tracker.services.users import UserRepository

_COLUMNS = "id, first_name, last_name, birthdate, email"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return parse_user(response.data[0])
        return None

    def find_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return parse_user(response.data[0])
        return None

    def find_by_email_containing(self, fragment: str) -> list[User]:
        """Return users whose email contains the fragment, ignoring case."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .ilike("email", f"%{fragment}%")
            .order("id", desc=False)
            .execute()
        )
        return [parse_user(row) for row in response.data or []]

    def find_by_birthdate_before(self, day: date) -> list[User]:
        """Return users born strictly before the given day."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .lt("birthdate", day.isoformat())
            .order("id", desc=False)
            .execute()
        )
        return [parse_user(row) for row in response.data or []]

    def find_all(self) -> list[User]:
        """Return every user ordered by id."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .order("id", desc=False)
            .execute()
        )
        return [parse_user(row) for row in response.data or []]

    def find_all_paged(
        self, page: int, size: int, sort_field: str, ascending: bool
    ) -> list[User]:
        """Return one page of users sorted by the given column."""
        start = page * size
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .order(sort_field, desc=not ascending)
            .range(start, start + size - 1)
            .execute()
        )
        return [parse_user(row) for row in response.data or []]

    def save(self, user: User) -> User:
        """Insert a new user row or update the existing one."""
        payload = {
            "first_name": user.first_name,
            "last_name": user.last_name,
            "birthdate": user.birthdate.isoformat(),
            "email": user.email,
        }
        if user.id is None:
            response = self.client.table("users").insert(payload).execute()
            if not response.data:
                raise RuntimeError("Failed to create user")
        else:
            response = (
                self.client.table("users").update(payload).eq("id", user.id).execute()
            )
            if not response.data:
                raise RuntimeError("Failed to update user")
        return parse_user(response.data[0])

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user row if it exists."""
        self.client.table("users").delete().eq("id", user_id).execute()


def parse_user(row: dict[str, object]) -> User:
    """Build a user from a ``users`` row."""
    return User(
        id=int(row["id"]),
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
        birthdate=date.fromisoformat(str(row["birthdate"])),
        email=str(row["email"]),
    )
