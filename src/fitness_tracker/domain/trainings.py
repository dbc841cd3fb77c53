"""Domain models for trainings."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from fitness_tracker.domain.users import User


class ActivityType(str, Enum):
    """Kinds of activity a training can record."""

    RUNNING = "RUNNING"
    CYCLING = "CYCLING"
    WALKING = "WALKING"
    SWIMMING = "SWIMMING"
    TENNIS = "TENNIS"
    TABLE_TENNIS = "TABLE_TENNIS"

    @property
    def display_name(self) -> str:
        """Human readable label."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def _missing_(cls, value: object) -> "ActivityType | None":
        if not isinstance(value, str):
            return None
        normalized = value.strip().upper().replace(" ", "_")
        if normalized == "TABLETENNIS":
            return cls.TABLE_TENNIS
        for member in cls:
            if member.value == normalized:
                return member
        return None


_DISPLAY_NAMES = {
    ActivityType.RUNNING: "Running",
    ActivityType.CYCLING: "Cycling",
    ActivityType.WALKING: "Walking",
    ActivityType.SWIMMING: "Swimming",
    ActivityType.TENNIS: "Tennis",
    ActivityType.TABLE_TENNIS: "Table Tennis",
}


@dataclass(frozen=True)
class Training:
    """Represents a training session owned by a user."""

    user: User
    start_time: datetime
    end_time: datetime
    activity_type: ActivityType
    distance: float
    average_speed: float
    id: int | None = None


@dataclass(frozen=True)
class TrainingPayload:
    """Training fields supplied by a caller, without the owning user."""

    start_time: datetime
    end_time: datetime
    activity_type: ActivityType
    distance: float
    average_speed: float
    id: int | None = None
