"""
Enums for the GPIO blink controller
"""

from enum import Enum, auto


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    HARDWARE = auto()    # GPIO peripheral, pin claims, writes
    SYSTEM = auto()      # Startup, exit status, fatal errors
    SHUTDOWN = auto()    # Signal handlers, stop requests
    LIFECYCLE = auto()   # Actuation loop state changes



class PinMode(Enum):
    """Electrical function of a GPIO line as reported by the driver"""
    INPUT = auto()
    OUTPUT = auto()
    ALT = auto()         # SPI, I2C, UART, hardware PWM...
    UNKNOWN = auto()


class PinLevel(Enum):
    """Logical level of a digital line"""
    LOW = 0              # 0V
    HIGH = 1             # 3.3V

    def inverted(self) -> "PinLevel":
        return PinLevel.HIGH if self is PinLevel.LOW else PinLevel.LOW


class LoopState(Enum):
    """Actuation loop states (STOPPING is terminal)"""
    RUNNING = auto()
    STOPPING = auto()


class GPIOBackend(Enum):
    """Peripheral implementations selectable by acquire_peripheral()"""
    HARDWARE = auto()    # RPi.GPIO
    MOCK = auto()        # In-memory, for development and tests
