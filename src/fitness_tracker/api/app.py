"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from fitness_tracker.api.errors import register_error_handlers
from fitness_tracker.api.goals import router as goals_router
from fitness_tracker.api.nutrition import router as nutrition_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Fitness Tracker API")
    app.state.container = container
    register_error_handlers(app)

    app.include_router(nutrition_router)
    app.include_router(goals_router)
    app.include_router(workouts_router)
    app.include_router(profile_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Application created", extra={"environment": container.settings.environment}
    )
    return app
