# =============================================================================
# lib/monitoring.py - Sentry Monitoring Wrapper
# =============================================================================
# Thin wrapper around sentry_sdk so route handlers depend on a small Monitor
# interface instead of the SDK's module-level functions.
#
# The SDK is initialized once at app creation from the Settings object.
# Without a DSN the SDK stays disabled and every capture call is a no-op.
#
# Usage:
#   from lib.monitoring import initialize_monitoring
#   monitor = initialize_monitoring(settings)
#   monitor.capture_message("hello")
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

if TYPE_CHECKING:
    from app.config import Settings

# Set up logging for this module
logger = logging.getLogger(__name__)


@runtime_checkable
class Monitor(Protocol):
    """Error-monitoring collaborator. Calls are fire-and-forget."""

    def capture_message(self, message: str, level: str = "info") -> None:
        ...

    def capture_exception(self, error: BaseException) -> None:
        ...

    def flush(self, timeout: float = 2.0) -> None:
        ...


class SentryMonitor:
    """
    Monitor backed by the Sentry SDK.

    Example:
        monitor = SentryMonitor(settings)
        monitor.init()
        monitor.capture_message("This is a test message")
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.enabled = False

    def init(self) -> bool:
        """
        Initialize the Sentry SDK from settings.

        The FastAPI/Starlette integrations are enabled automatically by the
        SDK; the logging integration is configured explicitly so log records
        are forwarded as Sentry logs when SENTRY_ENABLE_LOGS is set.

        Returns:
            True if the SDK was initialized, False if no DSN is configured
        """
        if not self.settings.sentry_enabled:
            logger.info("SENTRY_DSN not set - error monitoring disabled")
            return False

        sentry_sdk.init(
            dsn=self.settings.SENTRY_DSN,
            debug=self.settings.SENTRY_DEBUG,
            traces_sample_rate=self.settings.SENTRY_TRACES_SAMPLE_RATE,
            enable_logs=self.settings.SENTRY_ENABLE_LOGS,
            environment=self.settings.sentry_environment_name,
            release=self.settings.SENTRY_RELEASE,
            integrations=[
                LoggingIntegration(
                    level=logging.INFO,
                    event_level=logging.ERROR,
                    sentry_logs_level=logging.DEBUG,
                ),
            ],
        )
        self.enabled = True
        logger.info(
            f"Sentry initialized (environment={self.settings.sentry_environment_name}, "
            f"traces_sample_rate={self.settings.SENTRY_TRACES_SAMPLE_RATE})"
        )
        return True

    def capture_message(self, message: str, level: str = "info") -> None:
        try:
            sentry_sdk.capture_message(message, level=level)
        except Exception as e:
            logger.warning(f"Failed to send message to Sentry: {e}")

    def capture_exception(self, error: BaseException) -> None:
        try:
            sentry_sdk.capture_exception(error)
        except Exception as e:
            logger.warning(f"Failed to send exception to Sentry: {e}")

    def flush(self, timeout: float = 2.0) -> None:
        """Wait up to `timeout` seconds for queued events to be sent."""
        if self.enabled:
            sentry_sdk.flush(timeout=timeout)


def initialize_monitoring(settings: Settings) -> SentryMonitor:
    """Create a SentryMonitor and initialize the SDK from settings."""
    monitor = SentryMonitor(settings)
    monitor.init()
    return monitor
