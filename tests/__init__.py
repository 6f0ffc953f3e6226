# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Sentry Monitored API:
# - test_models.py: WeatherForecast model and temperature conversion
# - test_random_source.py: Random source implementations
# - test_forecast_service.py: Forecast generation
# - test_config.py: Settings loading and validation
# - test_monitoring.py: Sentry wrapper
# - test_api.py: HTTP endpoints, error handling and docs exposure
#
# Run tests with: pytest
# =============================================================================
