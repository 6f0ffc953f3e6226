# =============================================================================
# core/services/forecast_service.py - Sample Forecast Generation
# =============================================================================
# Builds the canned forecast returned by GET /weatherforecast.
# Every call produces fresh, independent entries; nothing is stored.
# =============================================================================

import logging
from datetime import date, timedelta
from typing import Callable

from core.models.forecast import SUMMARIES, WeatherForecast
from lib.random_source import RandomSource

logger = logging.getLogger(__name__)

# Number of days returned, starting tomorrow
FORECAST_DAYS = 5

# Temperature range in Celsius (upper bound exclusive)
MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 55


class ForecastService:
    """
    Service for generating sample weather forecasts.

    Both the random source and the clock are injected so tests can pin
    exact output.

    Example:
        service = ForecastService(SharedRandom())
        forecast = service.get_forecast()  # 5 entries, tomorrow onwards
    """

    def __init__(
        self,
        random_source: RandomSource,
        today: Callable[[], date] = date.today,
    ):
        self.random_source = random_source
        self.today = today

    def get_forecast(self, days: int = FORECAST_DAYS) -> list[WeatherForecast]:
        """
        Generate one forecast entry per day for the next `days` days.

        Args:
            days: Number of entries (day +1 .. day +days)

        Returns:
            Entries in date order
        """
        start = self.today()
        forecast = [
            WeatherForecast(
                date=start + timedelta(days=index),
                temperature_c=self.random_source.randint(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
                summary=SUMMARIES[self.random_source.index(len(SUMMARIES))],
            )
            for index in range(1, days + 1)
        ]
        logger.debug(f"Generated {len(forecast)} forecast entries from {start.isoformat()}")
        return forecast
