# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Sentry Monitored API.
# It configures the FastAPI application with logging, Sentry, middleware,
# routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.config import Settings, get_settings
from app.exceptions import unhandled_exception_handler
from app.routers import sentry_checks, weather
from core.services.forecast_service import ForecastService
from lib.monitoring import Monitor, initialize_monitoring
from lib.random_source import SharedRandom

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def configure_logging(settings: Settings) -> None:
    """Configure root logging. The root level always follows settings.DEBUG."""
    level = logging.DEBUG if settings.DEBUG else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: log the effective configuration
    - Shutdown: flush pending monitoring events
    """
    settings = app.state.settings
    logger.info(f"Starting Sentry Monitored API in {settings.ENVIRONMENT} mode")
    logger.info(f"Sentry monitoring: {'enabled' if settings.sentry_enabled else 'disabled'}")

    yield

    logger.info("Shutting down Sentry Monitored API")
    app.state.monitor.flush()


def create_app(
    settings: Settings | None = None,
    *,
    monitor: Monitor | None = None,
    forecast_service: ForecastService | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; defaults to get_settings()
        monitor: Error-monitoring collaborator; defaults to a SentryMonitor
                 initialized from settings
        forecast_service: Forecast generator; defaults to one backed by
                          a thread-safe SharedRandom

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)

    # Sentry must be initialized before the first request is served
    if monitor is None:
        monitor = initialize_monitoring(settings)
    if forecast_service is None:
        forecast_service = ForecastService(SharedRandom())

    # API docs are only served in development
    docs_enabled = settings.is_development

    app = FastAPI(
        title="Sentry Monitored API",
        description=(
            "Demo API for verifying Sentry integration: a sample weather "
            "forecast plus endpoints that send a message, raise an exception "
            "and write log records."
        ),
        version=API_VERSION,
        openapi_url="/openapi/v1.json" if docs_enabled else None,
        docs_url="/swagger" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.monitor = monitor
    app.state.forecast_service = forecast_service

    # =========================================================================
    # Middleware
    # =========================================================================

    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(weather.router, tags=["Weather"])
    app.include_router(sentry_checks.router, tags=["Sentry"])

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT)
