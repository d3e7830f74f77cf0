#!/usr/bin/env python3
"""
GPIO Blink - Main Entry Point

Blinks an LED attached to a GPIO pin until SIGINT (Ctrl+C) or SIGTERM
arrives, then turns the LED off and restores the pin's original mode
before exiting.

Hardware:
    - LED: BCM GPIO 23 (physical pin 16), through a series resistor

Exit status:
    0  graceful shutdown after a signal
    1  GPIO peripheral or pin unavailable, or a GPIO write failed
"""

import sys
import time
from typing import Callable

from controllers.blink_controller import BlinkController
from hardware.gpio import (
    GPIOError,
    IGPIOPeripheral,
    acquire_peripheral,
    claim_output_pin,
)
from lifecycle import ShutdownIntent, ShutdownSignalCoordinator
from models.config import BlinkConfig, DEFAULT_CONFIG
from utils.logger import get_logger, configure_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)


def main(
    config: BlinkConfig = DEFAULT_CONFIG,
    acquire: Callable[[], IGPIOPeripheral] = acquire_peripheral,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run the blinker and return the process exit status."""
    configure_logger(min_level=config.log_level, use_colors=config.use_colors)
    log.info("GPIO blink starting", pin=config.pin, interval=f"{config.interval_s}s")

    try:
        peripheral = acquire()
        pin = claim_output_pin(peripheral, config.pin)
    except GPIOError as e:
        # Nothing claimed yet, nothing to restore
        return _fatal(e)

    try:
        with pin:
            intent = ShutdownIntent()
            ShutdownSignalCoordinator(intent).install(config.signals)
            BlinkController(pin, intent, interval_s=config.interval_s, sleep=sleep).run()
    except GPIOError as e:
        # The with-block has already restored the pin mode (best effort)
        return _fatal(e)

    log.info("Shutdown complete", pin=config.pin, mode=pin.mode.name)
    return 0


def _fatal(error: GPIOError) -> int:
    log.error("Fatal GPIO error", error_type=type(error).__name__)
    print(f"Error: {error}", file=sys.stderr)
    return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
