"""Pydantic transport models and entity mappers for the REST API."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from fitness_tracker.domain.trainings import ActivityType, Training, TrainingPayload
from fitness_tracker.domain.users import User, UserPayload


class UserRequest(BaseModel):
    """User body for create and update; omitted fields stay ``None``."""

    id: int | None = None
    first_name: str | None = None
    last_name: str | None = None
    birthdate: date | None = None
    email: str | None = None


class UserResponse(BaseModel):
    """Full user representation."""

    id: int
    first_name: str
    last_name: str
    birthdate: date
    email: str


class UserSimpleResponse(BaseModel):
    """User representation without contact details."""

    id: int
    first_name: str
    last_name: str


class UserEmailResponse(BaseModel):
    """User id and email, returned by email searches."""

    id: int
    email: str


class TrainingRequest(BaseModel):
    """Training body for create and update."""

    id: int | None = None
    user_id: int
    start_time: datetime
    end_time: datetime
    activity_type: ActivityType
    distance: float = Field(ge=0)
    average_speed: float = Field(ge=0)

    @field_validator("activity_type", mode="before")
    @classmethod
    def _parse_activity_type(cls, value: object) -> ActivityType:
        return ActivityType(value)


class TrainingResponse(BaseModel):
    """Training representation with its owning user."""

    id: int
    user: UserResponse
    start_time: datetime
    end_time: datetime
    activity_type: ActivityType
    activity_type_label: str
    distance: float
    average_speed: float


def to_user_payload(request: UserRequest) -> UserPayload:
    return UserPayload(
        id=request.id,
        first_name=request.first_name,
        last_name=request.last_name,
        birthdate=request.birthdate,
        email=request.email,
    )


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        birthdate=user.birthdate,
        email=user.email,
    )


def to_user_simple_response(user: User) -> UserSimpleResponse:
    return UserSimpleResponse(
        id=user.id, first_name=user.first_name, last_name=user.last_name
    )


def to_user_email_response(user: User) -> UserEmailResponse:
    return UserEmailResponse(id=user.id, email=user.email)


def to_training_payload(request: TrainingRequest) -> TrainingPayload:
    return TrainingPayload(
        id=request.id,
        start_time=request.start_time,
        end_time=request.end_time,
        activity_type=request.activity_type,
        distance=request.distance,
        average_speed=request.average_speed,
    )


def to_training_response(training: Training) -> TrainingResponse:
    return TrainingResponse(
        id=training.id,
        user=to_user_response(training.user),
        start_time=training.start_time,
        end_time=training.end_time,
        activity_type=training.activity_type,
        activity_type_label=training.activity_type.display_name,
        distance=training.distance,
        average_speed=training.average_speed,
    )
