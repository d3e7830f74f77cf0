"""
Shutdown signal coordinator.

Installs one OS signal handler for SIGINT (Ctrl+C) and SIGTERM that publishes
a stop request into a ShutdownIntent. Everything else (logging the reason,
forcing the pin low, releasing hardware) happens in the main flow after the
blink loop observes the request.
"""

import signal
from typing import Iterable, Tuple

from lifecycle.shutdown_intent import ShutdownIntent
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)

DEFAULT_SIGNALS: Tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class ShutdownSignalCoordinator:
    """
    Connects termination-class signals to a ShutdownIntent.

    The registered handler performs a single operation, intent.request_stop().
    It may run at any bytecode boundary of the main thread and may run many
    times (repeated Ctrl+C); both are harmless because the write is idempotent.

    The subscription lives for the rest of the process. There is no uninstall.

    Example:
        intent = ShutdownIntent()
        ShutdownSignalCoordinator(intent).install()
        BlinkController(pin, intent).run()
    """

    def __init__(self, intent: ShutdownIntent):
        self._intent = intent
        self._installed: Tuple[signal.Signals, ...] = ()

    @property
    def intent(self) -> ShutdownIntent:
        return self._intent

    @property
    def installed_signals(self) -> Tuple[signal.Signals, ...]:
        return self._installed

    def install(self, signals: Iterable[signal.Signals] = DEFAULT_SIGNALS) -> None:
        """
        Register the stop handler for each signal.

        Must be called from the main thread (signal.signal raises ValueError
        otherwise).

        Args:
            signals: Signal kinds to subscribe (default SIGINT, SIGTERM)
        """
        kinds = tuple(signal.Signals(sig) for sig in signals)
        if not kinds:
            raise ValueError("No signals given to install()")

        request_stop = self._intent.request_stop

        def handler(signum, frame) -> None:
            request_stop()

        for sig in kinds:
            signal.signal(sig, handler)

        self._installed = kinds
        log.info(
            "Signal handlers installed",
            signals=", ".join(sig.name for sig in kinds),
        )
