"""
GPIO error taxonomy.

Every error is fatal: nothing in the blinker retries a failed claim or write.
str(error) renders "<description> (<cause>)", which the entry point prints
after an "Error: " prefix.
"""


class GPIOError(Exception):
    """Base class for GPIO failures with a human-readable description and cause"""

    def __init__(self, description: str, cause: object = None):
        super().__init__(description, cause)
        self.description = description
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.description
        return f"{self.description} ({self.cause})"


class PeripheralUnavailable(GPIOError):
    """GPIO subsystem cannot be opened (driver missing, not a Pi, no permission)"""

    def __init__(self, cause: object = None):
        super().__init__("Can't access GPIO peripheral", cause)


class PinUnavailable(GPIOError):
    """Requested pin is out of range, already claimed, or rejected by the driver"""

    def __init__(self, pin: int, cause: object = None):
        super().__init__(f"Can't access GPIO pin {pin}", cause)
        self.pin = pin


class HardwareIOFailure(GPIOError):
    """A write to a claimed output pin failed"""

    def __init__(self, pin: int, cause: object = None):
        super().__init__(f"GPIO write failed on pin {pin}", cause)
        self.pin = pin
