"""
Output pin handle - scoped ownership of one GPIO line.

claim_output_pin() records the pin's mode, configures it as output and
returns an OutputPin. Used as a context manager, the handle puts the original
mode back when the with-block ends, whichever way it ends.
"""

from hardware.gpio.errors import GPIOError, HardwareIOFailure
from hardware.gpio.gpio_peripheral_interface import IGPIOPeripheral
from models.enums import PinMode, PinLevel
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class OutputPin:
    """
    Exclusive handle to one GPIO line configured as output.

    Args:
        peripheral: Peripheral that owns the line
        pin: BCM GPIO pin number
        original_mode: Mode read before the claim, restored on release
        reset_on_release: Restore original_mode on release (default True);
            when False the line stays an output
    """

    def __init__(
        self,
        peripheral: IGPIOPeripheral,
        pin: int,
        original_mode: PinMode,
        reset_on_release: bool = True,
    ):
        self._peripheral = peripheral
        self._pin = pin
        self._original_mode = original_mode
        self.reset_on_release = reset_on_release
        self._level = PinLevel.LOW
        self._released = False
        self._mode = PinMode.OUTPUT

    @property
    def pin(self) -> int:
        return self._pin

    @property
    def mode(self) -> PinMode:
        """Mode the line is in now; after release, the one the peripheral applied."""
        return self._mode

    @property
    def original_mode(self) -> PinMode:
        return self._original_mode

    @property
    def level(self) -> PinLevel:
        return self._level

    @property
    def released(self) -> bool:
        return self._released

    # ----------------------------------------------------------------------
    # Output
    # ----------------------------------------------------------------------

    def toggle(self) -> PinLevel:
        """Invert the logical level and return the new one."""
        self._write(self._level.inverted())
        return self._level

    def set_high(self) -> None:
        self._write(PinLevel.HIGH)

    def set_low(self) -> None:
        self._write(PinLevel.LOW)

    def _write(self, level: PinLevel) -> None:
        if self._released:
            raise HardwareIOFailure(self._pin, "pin already released")
        self._peripheral.write(self._pin, level)
        self._level = level

    # ----------------------------------------------------------------------
    # Lifecycle
    # ----------------------------------------------------------------------

    def release(self) -> None:
        """Give the line back to the peripheral. Safe to call more than once."""
        if self._released:
            return
        self._released = True

        mode = self._original_mode if self.reset_on_release else PinMode.OUTPUT
        self._mode = self._peripheral.release(self._pin, mode)
        log.debug("Output pin released", pin=self._pin, mode=self._mode.name)

    def __enter__(self) -> "OutputPin":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.release()
            return False

        # Unwinding: a restore failure must not hide the original error
        try:
            self.release()
        except GPIOError as e:
            log.error("Pin restore failed during error unwinding", pin=self._pin, error=str(e))
        return False

    def __repr__(self) -> str:
        state = "released" if self._released else self._level.name
        return f"OutputPin(pin={self._pin}, {state})"


def claim_output_pin(
    peripheral: IGPIOPeripheral,
    pin: int,
    component: str = "BlinkController",
    reset_on_release: bool = True,
) -> OutputPin:
    """
    Claim pin as an output driven LOW.

    Raises:
        PinUnavailable: pin out of range, already claimed, or rejected by the driver
    """
    original_mode = peripheral.read_mode(pin)
    peripheral.claim_output(pin, component)

    log.debug("Output pin claimed", pin=pin, original_mode=original_mode.name)
    return OutputPin(peripheral, pin, original_mode, reset_on_release=reset_on_release)
