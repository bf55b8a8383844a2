"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitness_tracker.api.accounts import router as accounts_router
from fitness_tracker.api.errors import register_exception_handlers
from fitness_tracker.api.food_logs import router as food_logs_router
from fitness_tracker.api.preferences import router as preferences_router
from fitness_tracker.api.workout_plans import router as workout_plans_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.config import parse_cors_origins
from fitness_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Fitness tracker API starting (environment=%s)", settings.environment)
        yield
        logger.info("Fitness tracker API stopped")

    app = FastAPI(
        lifespan=lifespan,
        title="Fitness Tracker API",
        description="Accounts, workout plans, food logs and nutrition targets.",
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(settings.cors_allow_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Origin",
            "X-Requested-With",
            "Content-Type",
            "Accept",
            "Authorization",
        ],
    )
    register_exception_handlers(app, expose_errors=settings.environment == "local")

    app.include_router(accounts_router)
    app.include_router(preferences_router)
    app.include_router(workout_plans_router)
    app.include_router(food_logs_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "healthy"}

    return app
