"""Supabase-backed training repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from fitness_tracker.adapters.supabase_user_repository import parse_user
from fitness_tracker.domain.trainings import ActivityType, Training
from fitness_tracker.domain.users import User
from fitness_tracker.services.trainings import TrainingRepository

# Embeds the owning user through the trainings.user_id foreign key.
_COLUMNS = (
    "id, start_time, end_time, activity_type, distance, average_speed, "
    "user:users(id, first_name, last_name, birthdate, email)"
)


@dataclass
class SupabaseTrainingRepository(TrainingRepository):
    """Supabase implementation for training persistence."""

    client: Client

    def find_by_id(self, training_id: int) -> Training | None:
        """Return the training with the given id, if present."""
        response = (
            self.client.table("trainings")
            .select(_COLUMNS)
            .eq("id", training_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_training(response.data[0])
        return None

    def find_all(self) -> list[Training]:
        """Return every training ordered by id."""
        response = (
            self.client.table("trainings")
            .select(_COLUMNS)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_training(row) for row in response.data or []]

    def find_by_user_id(self, user_id: int) -> list[Training]:
        """Return trainings owned by a user."""
        response = (
            self.client.table("trainings")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_training(row) for row in response.data or []]

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        """Return trainings of one activity type."""
        response = (
            self.client.table("trainings")
            .select(_COLUMNS)
            .eq("activity_type", activity_type.value)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_training(row) for row in response.data or []]

    def find_by_end_after(self, moment: datetime) -> list[Training]:
        """Return trainings that ended strictly after the given moment."""
        response = (
            self.client.table("trainings")
            .select(_COLUMNS)
            .gt("end_time", moment.isoformat())
            .order("id", desc=False)
            .execute()
        )
        return [_parse_training(row) for row in response.data or []]

    def save(self, training: Training) -> Training:
        """Insert a new training row or overwrite the existing one."""
        if training.user.id is None:
            raise ValueError("Training owner must be persisted before saving")
        payload = {
            "user_id": training.user.id,
            "start_time": training.start_time.isoformat(),
            "end_time": training.end_time.isoformat(),
            "activity_type": training.activity_type.value,
            "distance": training.distance,
            "average_speed": training.average_speed,
        }
        table = self.client.table("trainings")
        if training.id is None:
            response = table.insert(payload).execute()
            if not response.data:
                raise RuntimeError("Failed to create training")
        else:
            response = table.update(payload).eq("id", training.id).execute()
            if not response.data:
                raise RuntimeError("Failed to update training")
        row = response.data[0]
        # Write responses do not embed the user; reuse the one already resolved.
        return _parse_training(row, owner=training.user)

    def delete_by_id(self, training_id: int) -> None:
        """Delete the training row if it exists."""
        self.client.table("trainings").delete().eq("id", training_id).execute()


def _parse_training(
    row: dict[str, object], owner: User | None = None
) -> Training:
    user_row = row.get("user")
    user = parse_user(user_row) if isinstance(user_row, dict) else owner
    if user is None:
        raise RuntimeError(f"Training {row.get('id')} has no owning user")
    return Training(
        id=int(row["id"]),
        user=user,
        start_time=datetime.fromisoformat(str(row["start_time"])),
        end_time=datetime.fromisoformat(str(row["end_time"])),
        activity_type=ActivityType(row["activity_type"]),
        distance=float(row.get("distance") or 0.0),
        average_speed=float(row.get("average_speed") or 0.0),
    )
