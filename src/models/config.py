"""
Fixed runtime configuration.

The blinker has no config file: pin and interval are build-time constants.
BlinkConfig only groups them so the entry point and tests share one source.
"""

import signal
from dataclasses import dataclass
from typing import Tuple

from models.enums import LogLevel

# BCM GPIO 23 is tied to physical pin 16.
GPIO_LED = 23
BLINK_INTERVAL_S = 0.5


@dataclass(frozen=True)
class BlinkConfig:
    pin: int = GPIO_LED
    interval_s: float = BLINK_INTERVAL_S
    signals: Tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)
    log_level: LogLevel = LogLevel.INFO
    use_colors: bool = True

    def __post_init__(self):
        if self.interval_s <= 0:
            raise ValueError(f"interval_s must be positive, got {self.interval_s}")
        if not self.signals:
            raise ValueError("at least one shutdown signal is required")


DEFAULT_CONFIG = BlinkConfig()
