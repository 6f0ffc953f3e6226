# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .forecast_service import (
    FORECAST_DAYS,
    MAX_TEMPERATURE_C,
    MIN_TEMPERATURE_C,
    ForecastService,
)

__all__ = [
    "FORECAST_DAYS",
    "MAX_TEMPERATURE_C",
    "MIN_TEMPERATURE_C",
    "ForecastService",
]
