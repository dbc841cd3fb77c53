"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime

import pytest

from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.trainings import ActivityType, Training
from fitness_tracker.domain.users import User
from fitness_tracker.services.trainings import TrainingRepository, TrainingService
from fitness_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[int, User] = field(default_factory=dict)
    saved: list[User] = field(default_factory=list)
    next_id: int = 1

    def find_by_id(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def find_by_email_containing(self, fragment: str) -> list[User]:
        needle = fragment.lower()
        return [user for user in self._ordered() if needle in user.email.lower()]

    def find_by_birthdate_before(self, day: date) -> list[User]:
        return [user for user in self._ordered() if user.birthdate < day]

    def find_all(self) -> list[User]:
        return self._ordered()

    def find_all_paged(
        self, page: int, size: int, sort_field: str, ascending: bool
    ) -> list[User]:
        ordered = sorted(
            self.users.values(),
            key=lambda user: getattr(user, sort_field),
            reverse=not ascending,
        )
        start = page * size
        return ordered[start : start + size]

    def save(self, user: User) -> User:
        if user.id is None:
            user = replace(user, id=self.next_id)
            self.next_id += 1
        self.users[user.id] = user
        self.saved.append(user)
        return user

    def delete_by_id(self, user_id: int) -> None:
        self.users.pop(user_id, None)

    def _ordered(self) -> list[User]:
        return sorted(self.users.values(), key=lambda user: user.id)


@dataclass
class InMemoryTrainingRepository(TrainingRepository):
    """In-memory training repository for tests."""

    trainings: dict[int, Training] = field(default_factory=dict)
    saved: list[Training] = field(default_factory=list)
    next_id: int = 1

    def find_by_id(self, training_id: int) -> Training | None:
        return self.trainings.get(training_id)

    def find_all(self) -> list[Training]:
        return sorted(self.trainings.values(), key=lambda training: training.id)

    def find_by_user_id(self, user_id: int) -> list[Training]:
        return [
            training for training in self.find_all() if training.user.id == user_id
        ]

    def find_by_activity_type(self, activity_type: ActivityType) -> list[Training]:
        return [
            training
            for training in self.find_all()
            if training.activity_type == activity_type
        ]

    def find_by_end_after(self, moment: datetime) -> list[Training]:
        return [training for training in self.find_all() if training.end_time > moment]

    def save(self, training: Training) -> Training:
        if training.id is None:
            training = replace(training, id=self.next_id)
            self.next_id += 1
        self.trainings[training.id] = training
        self.saved.append(training)
        return training

    def delete_by_id(self, training_id: int) -> None:
        self.trainings.pop(training_id, None)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def training_repository() -> InMemoryTrainingRepository:
    return InMemoryTrainingRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def training_service(
    training_repository: InMemoryTrainingRepository, user_service: UserService
) -> TrainingService:
    return TrainingService(repository=training_repository, user_provider=user_service)


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    training_service: TrainingService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=user_service,
        training_service=training_service,
    )
