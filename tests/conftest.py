# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a recording Monitor and a recording Sentry transport
# - Provides app/client fixtures built through create_app()
# =============================================================================

import logging
import os
from datetime import date

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.main builds a module-level app from the environment on import

os.environ.pop("SENTRY_DSN", None)
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
import sentry_sdk
from fastapi.testclient import TestClient
from sentry_sdk.transport import Transport

from app.config import Settings
from app.main import create_app
from core.services.forecast_service import ForecastService
from lib.monitoring import SentryMonitor
from lib.random_source import SharedRandom

FIXED_TODAY = date(2026, 10, 19)


# =============================================================================
# Test Doubles
# =============================================================================

class RecordingMonitor:
    """Monitor that keeps everything it is given."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []
        self.exceptions: list[BaseException] = []
        self.flush_count = 0

    def capture_message(self, message: str, level: str = "info") -> None:
        self.messages.append((message, level))

    def capture_exception(self, error: BaseException) -> None:
        self.exceptions.append(error)

    def flush(self, timeout: float = 2.0) -> None:
        self.flush_count += 1


class RecordingTransport(Transport):
    """Sentry transport that stores events and log items instead of sending them."""

    def __init__(self):
        super().__init__()
        self.events: list[dict] = []
        self.logs: list[dict] = []

    def capture_envelope(self, envelope) -> None:
        event = envelope.get_event()
        if event is not None:
            self.events.append(event)
        for item in envelope.items:
            if item.type == "log":
                # Batched logs arrive as {"items": [...]}
                payload = item.payload.json
                self.logs.extend(payload.get("items", [payload]))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def restore_root_log_level():
    """create_app() sets the root log level; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def settings():
    """Development settings, ignoring any local .env file."""
    return Settings(_env_file=None, ENVIRONMENT="development", DEBUG=True)


@pytest.fixture
def recording_monitor():
    return RecordingMonitor()


@pytest.fixture
def forecast_service():
    """Random forecasts pinned to a fixed 'today'."""
    return ForecastService(SharedRandom(), today=lambda: FIXED_TODAY)


@pytest.fixture
def app(settings, recording_monitor, forecast_service):
    return create_app(
        settings,
        monitor=recording_monitor,
        forecast_service=forecast_service,
    )


@pytest.fixture
def client(app):
    """Test client that turns server errors into 500 responses."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sentry_events():
    """
    Initialize the real Sentry SDK with a recording transport.

    Yields the list of captured events. The SDK is reset to a disabled
    client afterwards.
    """
    transport = RecordingTransport()
    sentry_sdk.init(
        dsn="https://public@sentry.example.com/1",
        transport=transport,
        traces_sample_rate=0.0,
    )
    yield transport.events
    sentry_sdk.get_client().close()
    sentry_sdk.init(dsn=None)


@pytest.fixture
def sentry_monitor():
    """
    SentryMonitor initialized the way the app does it (logs enabled),
    with the client's transport swapped for a RecordingTransport.

    Yields (monitor, transport). The SDK is reset afterwards.
    """
    monitor = SentryMonitor(Settings(
        _env_file=None,
        ENVIRONMENT="development",
        DEBUG=False,
        SENTRY_DSN="https://public@sentry.example.com/1",
        SENTRY_DEBUG=False,
        SENTRY_TRACES_SAMPLE_RATE=0.0,
    ))
    monitor.init()
    transport = RecordingTransport()
    client = sentry_sdk.get_client()
    client.transport.kill()
    client.transport = transport
    yield monitor, transport
    sentry_sdk.get_client().close()
    sentry_sdk.init(dsn=None)
