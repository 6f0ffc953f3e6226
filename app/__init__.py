# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, logging and Sentry setup, error handlers
# - config.py: Environment variable loading and settings
# - exceptions.py: Demo exception and the global error handler
# - dependencies.py: Per-request access to shared services
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# forecast generation to the core/ package.
# =============================================================================
