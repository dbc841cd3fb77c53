"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_training_repository import (
    SupabaseTrainingRepository,
)
from fitness_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from fitness_tracker.config import Settings
from fitness_tracker.services.trainings import TrainingService
from fitness_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    training_service: TrainingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseUserRepository(supabase_client))
    training_service = TrainingService(
        repository=SupabaseTrainingRepository(supabase_client),
        user_provider=user_service,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        training_service=training_service,
    )
