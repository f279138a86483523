"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from macro_tracker.api.ai_meals import router as ai_meals_router
from macro_tracker.api.auth import router as auth_router
from macro_tracker.api.daily_logs import router as daily_logs_router
from macro_tracker.api.errors import register_exception_handlers
from macro_tracker.api.goals import router as goals_router
from macro_tracker.api.meals import router as meals_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.seed import seed_demo_data


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Macro Tracker", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        SessionMiddleware,
        secret_key=container.settings.session_secret,
        max_age=container.settings.session_max_age_seconds,
        same_site="lax",
        https_only=container.settings.environment not in {"local", "test"},
    )
    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(goals_router)
    app.include_router(meals_router)
    app.include_router(daily_logs_router)
    app.include_router(ai_meals_router)

    if container.settings.seed_demo_data:
        user = seed_demo_data(container)
        logger.info("Demo user available: %s", user.username)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
