"""
Blink controller - the actuation loop.

RUNNING:  check the shutdown intent, toggle the pin, sleep one interval.
STOPPING: force the pin LOW once and hand control back to the caller, whose
          with-block then releases the pin.
"""

import time
from typing import Callable

from hardware.gpio.output_pin import OutputPin
from lifecycle.shutdown_intent import ShutdownIntent
from models.config import BLINK_INTERVAL_S
from models.enums import LoopState
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)


class BlinkController:
    """
    Toggles an output pin at a fixed interval until a stop is requested.

    The intent is polled once per iteration, before the toggle. The sleep does
    not watch it, so a stop request is noticed at most one interval late.
    Hardware write failures (HardwareIOFailure) are not caught here.

    Args:
        pin: Claimed output pin, owned by the caller
        intent: Shutdown flag written by the signal handler
        interval_s: Sleep between toggles (default 0.5s)
        sleep: Blocking sleep function (injectable for tests)
    """

    def __init__(
        self,
        pin: OutputPin,
        intent: ShutdownIntent,
        interval_s: float = BLINK_INTERVAL_S,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._pin = pin
        self._intent = intent
        self._interval_s = interval_s
        self._sleep = sleep
        self._state = LoopState.RUNNING
        self._toggle_count = 0

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def toggle_count(self) -> int:
        return self._toggle_count

    def run(self) -> None:
        """Blink until the intent reads "stop", then leave the pin LOW."""
        if self._state is LoopState.STOPPING:
            raise RuntimeError("BlinkController already stopped")

        log.info("Blink loop started", pin=self._pin.pin, interval=f"{self._interval_s}s")

        while self._state is LoopState.RUNNING:
            if self._intent.stop_requested:
                self._state = LoopState.STOPPING
                break

            level = self._pin.toggle()
            self._toggle_count += 1
            log.debug("Pin toggled", pin=self._pin.pin, pin_level=level.name)

            self._sleep(self._interval_s)

        log.info("Stop requested → turning LED off", pin=self._pin.pin)
        self._pin.set_low()

        log.info("Blink loop stopped", toggles=self._toggle_count)
