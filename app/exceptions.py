# =============================================================================
# app/exceptions.py - Exceptions and Global Error Handler
# =============================================================================
# DemoException is raised on purpose by GET /checkSentryWithException.
# Routes never catch it; it falls through to unhandled_exception_handler,
# which reports it to the monitor and answers with a 500.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

DEMO_EXCEPTION_MESSAGE = "This is a test exception"


class DemoException(RuntimeError):
    """Deliberate failure used to exercise exception capture."""

    def __init__(self, message: str = DEMO_EXCEPTION_MESSAGE):
        super().__init__(message)
        self.message = message


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle exceptions no route dealt with.

    Reports the exception to the app's monitor before logging it, so the
    Sentry event carries the exception (the log record is then deduplicated
    against it). Returns a generic 500 body without internals.
    """
    monitor = getattr(request.app.state, "monitor", None)
    if monitor is not None:
        monitor.capture_exception(exc)

    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
