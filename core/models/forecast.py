# =============================================================================
# core/models/forecast.py - Weather Forecast Schema
# =============================================================================
# The single value type returned by GET /weatherforecast.
#
# - WeatherForecast: one synthetic forecast day (immutable)
# - SUMMARIES: the fixed, ordered summary vocabulary
#
# Fields serialize in camelCase (temperatureC, temperatureF) to match the
# public JSON contract. temperatureF is never stored; it is derived from
# temperatureC every time it is read.
# =============================================================================

import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Ordered from coldest to hottest
SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

# Divisor used for the Celsius -> Fahrenheit conversion (~ 5/9)
FAHRENHEIT_DIVISOR = 0.5556


def celsius_to_fahrenheit(temperature_c: int) -> int:
    """
    Convert Celsius to whole Fahrenheit degrees.

    int() truncates toward zero, so negative results round up:
    -20 C -> 32 + int(-35.997...) -> -3 F.
    """
    return 32 + int(temperature_c / FAHRENHEIT_DIVISOR)


class WeatherForecast(BaseModel):
    """
    One day of sample forecast data.

    Example:
        {
            "date": "2026-10-20",
            "temperatureC": 21,
            "summary": "Mild",
            "temperatureF": 69
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Calendar date, no time component
    date: datetime.date = Field(
        ...,
        description="Forecast date (YYYY-MM-DD)"
    )

    temperature_c: int = Field(
        ...,
        alias="temperatureC",
        description="Temperature in degrees Celsius"
    )

    summary: str | None = Field(
        default=None,
        description="Short description of the weather"
    )

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        """Temperature in degrees Fahrenheit, derived from temperatureC."""
        return celsius_to_fahrenheit(self.temperature_c)
