# =============================================================================
# app/routers/sentry_checks.py - Sentry Integration Checks
# =============================================================================
# Endpoints that deliberately hit the monitoring paths so a deployment can be
# checked against the Sentry dashboard:
# - /checkSentry: sends an info message
# - /checkSentryWithException: raises an unhandled exception
# - /checkSentryWithLogging: writes one log record per level
#
# **Warning:** These endpoints exist to generate Sentry noise. Do not expose
# them on a public production deployment.
# =============================================================================

import logging

from fastapi import APIRouter, Response

from app.dependencies import MonitorDep
from app.exceptions import DemoException

logger = logging.getLogger(__name__)
# All four check records are always created; handler levels decide what is shown
logger.setLevel(logging.DEBUG)

router = APIRouter()

TEST_MESSAGE = "This is a test message"
TEST_LOG_MESSAGE = "This is a test log"


@router.get(
    "/checkSentry",
    name="CheckSentryCaptureMessage",
    operation_id="CheckSentryCaptureMessage",
    response_class=Response,
)
def check_sentry(monitor: MonitorDep):
    """Send an informational message to Sentry. Returns an empty 200."""
    monitor.capture_message(TEST_MESSAGE)
    return Response(status_code=200)


@router.get(
    "/checkSentryWithException",
    name="CheckSentryException",
    operation_id="CheckSentryException",
    response_class=Response,
)
def check_sentry_with_exception():
    """
    Always fails.

    The exception is left to the global error handler, which reports it
    to Sentry and answers with a 500.
    """
    raise DemoException()


@router.get(
    "/checkSentryWithLogging",
    name="CheckSentryLog",
    operation_id="CheckSentryLog",
    response_class=Response,
)
def check_sentry_with_logging():
    """Write the same message at ERROR, INFO, WARNING and DEBUG. Returns an empty 200."""
    logger.error(TEST_LOG_MESSAGE)
    logger.info(TEST_LOG_MESSAGE)
    logger.warning(TEST_LOG_MESSAGE)
    logger.debug(TEST_LOG_MESSAGE)
    return Response(status_code=200)
