"""Training-related business logic."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from fitness_tracker.domain.errors import InvalidArgumentError, TrainingNotFoundError
from fitness_tracker.domain.trainings import ActivityType, Training, TrainingPayload
from fitness_tracker.domain.users import User

_logger = logging.getLogger(__name__)


class TrainingRepository(Protocol):
    """Persistence interface for trainings."""

    def find_by_id(self, training_id: int) -> Training | None:
        """Return the training with the given id, if present."""

    def find_all(self) -> list[Training]:
        """Return every training."""

    def find_by_user_id(self, user_id: int) -> list[Training]:
        """Return trainings owned by a user."""

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        """Return trainings of one activity type."""

    def find_by_end_after(self, moment: datetime) -> list[Training]:
        """Return trainings that ended strictly after the given moment."""

    def save(self, training: Training) -> Training:
        """Insert a training without id or update an existing one."""

    def delete_by_id(self, training_id: int) -> None:
        """Delete the training if it exists."""


class UserProvider(Protocol):
    """Read access to users needed to resolve training owners."""

    def get_user(self, user_id: int) -> User | None:
        """Return a user by id, if present."""


@dataclass
class TrainingService:
    """Application service for trainings."""

    repository: TrainingRepository
    user_provider: UserProvider

    def create_training(self, payload: TrainingPayload, user_id: int) -> Training:
        """Persist a new training for an existing user."""
        _logger.info("Creating training for user id=%s", user_id)
        if payload.id is not None:
            raise InvalidArgumentError(
                "Training already has an ID, create is not permitted"
            )
        user = self._resolve_user(user_id)
        return self.repository.save(
            Training(
                user=user,
                start_time=payload.start_time,
                end_time=payload.end_time,
                activity_type=payload.activity_type,
                distance=payload.distance,
                average_speed=payload.average_speed,
            )
        )

    def update_training(
        self, payload: TrainingPayload, training_id: int, user_id: int
    ) -> Training:
        """Replace every mutable field of an existing training."""
        _logger.info("Updating training id=%s user id=%s", training_id, user_id)
        existing = self.repository.find_by_id(training_id)
        if existing is None:
            raise TrainingNotFoundError(training_id)
        user = self._resolve_user(user_id)
        return self.repository.save(
            Training(
                id=existing.id,
                user=user,
                start_time=payload.start_time,
                end_time=payload.end_time,
                activity_type=payload.activity_type,
                distance=payload.distance,
                average_speed=payload.average_speed,
            )
        )

    def remove_training(self, training_id: int) -> None:
        """Delete a training; unknown ids are ignored."""
        _logger.info("Removing training id=%s", training_id)
        self.repository.delete_by_id(training_id)

    def get_training(self, training_id: int) -> Training | None:
        return self.repository.find_by_id(training_id)

    def get_all_trainings(self) -> list[Training]:
        return self.repository.find_all()

    def get_trainings_by_user_id(self, user_id: int) -> list[Training]:
        return self.repository.find_by_user_id(user_id)

    def get_trainings_by_activity_type(
        self, activity_type: ActivityType
    ) -> list[Training]:
        return self.repository.find_by_activity_type(activity_type)

    def get_trainings_with_end_after(self, moment: datetime) -> list[Training]:
        """Return trainings finished after the given moment."""
        return self.repository.find_by_end_after(moment)

    def _resolve_user(self, user_id: int) -> User:
        user = self.user_provider.get_user(user_id)
        if user is None:
            raise InvalidArgumentError(f"User with ID {user_id} not found")
        return user
