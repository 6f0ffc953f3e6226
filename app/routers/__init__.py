# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - weather.py: Sample weather forecast endpoint
# - sentry_checks.py: Endpoints that exercise Sentry message, exception and
#   log capture
#
# Each router is mounted in main.py. The routers together form the route
# table; adding an endpoint never touches dispatch.
# =============================================================================

from . import sentry_checks
from . import weather

__all__ = [
    "sentry_checks",
    "weather",
]
