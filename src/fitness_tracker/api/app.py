"""FastAPI application factory."""

from fastapi import FastAPI

from fitness_tracker.api.trainings import router as trainings_router
from fitness_tracker.api.users import router as users_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    app = FastAPI(title="fitness-tracker")
    app.state.container = container

    app.include_router(users_router)
    app.include_router(trainings_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
