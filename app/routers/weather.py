# =============================================================================
# app/routers/weather.py - Weather Forecast Endpoint
# =============================================================================
# Serves the sample forecast: five days starting tomorrow with random
# temperatures and summaries.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import ForecastServiceDep
from core.models.forecast import WeatherForecast

router = APIRouter()


@router.get(
    "/weatherforecast",
    response_model=list[WeatherForecast],
    name="GetWeatherForecast",
    operation_id="GetWeatherForecast",
)
def get_weather_forecast(forecast_service: ForecastServiceDep):
    """
    Get a 5-day sample weather forecast.

    Values are random on every call: temperatureC is in [-20, 55) and
    summary comes from a fixed 10-word vocabulary.
    """
    return forecast_service.get_forecast()
