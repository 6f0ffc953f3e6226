# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas returned by the API:
# - forecast.py: WeatherForecast schema and the summary vocabulary
#
# These models define the "contract" between API and clients.
# =============================================================================

from .forecast import (
    FAHRENHEIT_DIVISOR,
    SUMMARIES,
    WeatherForecast,
    celsius_to_fahrenheit,
)

__all__ = [
    "FAHRENHEIT_DIVISOR",
    "SUMMARIES",
    "WeatherForecast",
    "celsius_to_fahrenheit",
]
