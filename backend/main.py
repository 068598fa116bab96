"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from application.exceptions import (
    HunterNotFoundError,
    InvalidXPGainError,
    PersistenceError,
    ProfileValidationError,
    QuestNotCompletableError,
)
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Hunter System API",
        description="Gamified fitness tracking: workouts, quests and RPG progression",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _register_exception_handlers(app)
    _include_routers(app)

    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY not set: quest generation will always use the fallback quest")

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for hunter-system-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _register_exception_handlers(app: FastAPI) -> None:
    """Map application exceptions onto HTTP responses."""

    @app.exception_handler(HunterNotFoundError)
    async def hunter_not_found_handler(request: Request, exc: HunterNotFoundError):
        return _error(404, "User not found")

    @app.exception_handler(QuestNotCompletableError)
    async def quest_not_completable_handler(request: Request, exc: QuestNotCompletableError):
        return _error(409, "Quest not found or already completed")

    @app.exception_handler(ProfileValidationError)
    async def profile_validation_handler(request: Request, exc: ProfileValidationError):
        return _error(400, exc.message)

    @app.exception_handler(InvalidXPGainError)
    async def invalid_xp_gain_handler(request: Request, exc: InvalidXPGainError):
        return _error(400, str(exc))

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
        return _error(503, "Database temporarily unavailable. Please try again.")


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        profile_router,
        workouts_router,
        quests_router,
        system_router,
        meals_router,
        leaderboard_router,
        stats_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(profile_router)
    app.include_router(workouts_router)
    app.include_router(quests_router)
    app.include_router(system_router)
    app.include_router(meals_router)
    app.include_router(leaderboard_router)
    app.include_router(stats_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
