# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The objects themselves are created once in create_app() and stored on
# app.state; the providers below just hand them out per request.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.forecast_service import ForecastService
from lib.monitoring import Monitor


def get_monitor(request: Request) -> Monitor:
    """Error-monitoring collaborator (Sentry in production)."""
    return request.app.state.monitor


def get_forecast_service(request: Request) -> ForecastService:
    """Forecast generator bound to the app's random source."""
    return request.app.state.forecast_service


# Type aliases for dependency injection
MonitorDep = Annotated[Monitor, Depends(get_monitor)]
ForecastServiceDep = Annotated[ForecastService, Depends(get_forecast_service)]
