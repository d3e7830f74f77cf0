"""
Lifecycle subsystem
-------------------

Exports the public API for graceful shutdown:
    from lifecycle import ShutdownIntent, ShutdownSignalCoordinator
"""

from .shutdown_intent import ShutdownIntent
from .signal_coordinator import ShutdownSignalCoordinator, DEFAULT_SIGNALS

__all__ = [
    "ShutdownIntent",
    "ShutdownSignalCoordinator",
    "DEFAULT_SIGNALS",
]
