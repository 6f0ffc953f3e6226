# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - random_source.py: Injectable random source (thread-safe default + test double)
# - monitoring.py: Sentry wrapper behind a small Monitor interface
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.monitoring import Monitor, SentryMonitor, initialize_monitoring
from lib.random_source import RandomSource, SequenceRandom, SharedRandom

__all__ = [
    # Monitoring
    "Monitor",
    "SentryMonitor",
    "initialize_monitoring",
    # Randomness
    "RandomSource",
    "SequenceRandom",
    "SharedRandom",
]
