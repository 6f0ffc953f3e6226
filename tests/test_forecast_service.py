# =============================================================================
# tests/test_forecast_service.py - Forecast Generation Tests
# =============================================================================

import math
from datetime import date, timedelta

from core.models import SUMMARIES
from core.services import FORECAST_DAYS, ForecastService
from lib.random_source import SequenceRandom, SharedRandom

TODAY = date(2026, 12, 30)


def make_service(random_source=None) -> ForecastService:
    return ForecastService(random_source or SharedRandom(), today=lambda: TODAY)


class TestForecastService:
    """Tests for ForecastService.get_forecast."""

    def test_returns_five_entries(self):
        assert len(make_service().get_forecast()) == FORECAST_DAYS == 5

    def test_dates_start_tomorrow_in_order(self):
        """Dates are today+1 .. today+5, crossing the year boundary."""
        forecast = make_service().get_forecast()

        assert [entry.date for entry in forecast] == [
            TODAY + timedelta(days=k) for k in range(1, 6)
        ]
        assert forecast[-1].date == date(2027, 1, 4)

    def test_values_within_bounds(self):
        """Repeated calls differ but always respect the invariants."""
        service = make_service()

        for _ in range(200):
            for entry in service.get_forecast():
                assert -20 <= entry.temperature_c < 55
                assert entry.summary in SUMMARIES
                assert entry.temperature_f == 32 + math.trunc(entry.temperature_c / 0.5556)

    def test_deterministic_source_pins_output(self):
        """Draws alternate temperature, summary index for each day."""
        rng = SequenceRandom([-20, 0, 54, 9, 21, 4, -1, 13, 0, 7])
        forecast = make_service(rng).get_forecast()

        assert [(e.temperature_c, e.summary, e.temperature_f) for e in forecast] == [
            (-20, "Freezing", -3),
            (54, "Scorching", 129),
            (21, "Mild", 69),
            (-1, "Cool", 31),
            (0, "Hot", 32),
        ]

    def test_custom_day_count(self):
        assert len(make_service().get_forecast(days=3)) == 3

    def test_uses_system_date_by_default(self):
        service = ForecastService(SharedRandom())
        before = date.today()
        forecast = service.get_forecast()
        after = date.today()

        assert forecast[0].date in (before + timedelta(days=1), after + timedelta(days=1))
