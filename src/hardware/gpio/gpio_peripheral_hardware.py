"""
GPIO Peripheral - RPi.GPIO backend

Owns the process-wide RPi.GPIO state for the blinker:
- Initialize RPi.GPIO (BCM mode, warnings off)
- Track claimed pins (one owner per pin)
- Translate driver exceptions into the GPIOError taxonomy
- Restore a pin's original mode when its handle is released
"""

from typing import Dict
from hardware.gpio.errors import PeripheralUnavailable, PinUnavailable, HardwareIOFailure
from hardware.gpio.gpio_peripheral_interface import IGPIOPeripheral, BCM_PIN_RANGE
from models.enums import PinMode, PinLevel
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class HardwareGPIOPeripheral(IGPIOPeripheral):
    """
    Infrastructure component wrapping RPi.GPIO.

    RPi.GPIO can only put a line back to input (GPIO.cleanup(pin)). A pin that
    was an alternate function (SPI, I2C, UART, PWM) before the claim comes
    back as input, with a warning.
    """

    def __init__(self):
        """Import and initialize RPi.GPIO, raising PeripheralUnavailable on failure"""
        try:
            import RPi.GPIO as GPIO
        except (ImportError, RuntimeError) as e:
            # RPi.GPIO raises RuntimeError at import time off a Raspberry Pi
            raise PeripheralUnavailable(e) from e

        self._gpio = GPIO
        self._registry: Dict[int, str] = {}  # pin -> component_name

        try:
            self._gpio.setwarnings(False)
            self._gpio.setmode(self._gpio.BCM)
        except (RuntimeError, ValueError) as e:
            # setmode refuses to switch if something already selected BOARD
            raise PeripheralUnavailable(e) from e

        self._alt_functions = {
            getattr(self._gpio, name)
            for name in ("SPI", "I2C", "HARD_PWM", "SERIAL")
            if hasattr(self._gpio, name)
        }

        log.info("GPIO peripheral initialized (BCM mode)")


    # -------------------------------
    # Registration
    # -------------------------------

    def read_mode(self, pin: int) -> PinMode:
        self._check_range(pin)
        try:
            function = self._gpio.gpio_function(pin)
        except (RuntimeError, ValueError) as e:
            raise PinUnavailable(pin, e) from e

        if function == self._gpio.IN:
            return PinMode.INPUT
        if function == self._gpio.OUT:
            return PinMode.OUTPUT
        if function in self._alt_functions:
            return PinMode.ALT
        return PinMode.UNKNOWN

    def claim_output(self, pin: int, component: str) -> None:
        """
        Register and setup output pin, driven LOW

        Args:
            pin: BCM GPIO pin number
            component: Component name for tracking

        Raises:
            PinUnavailable: If pin is out of range, already claimed, or setup fails
        """
        self._check_available(pin, component)

        try:
            self._gpio.setup(pin, self._gpio.OUT, initial=self._gpio.LOW)
        except (RuntimeError, ValueError) as e:
            raise PinUnavailable(pin, e) from e

        self._registry[pin] = component

        log.info(
            "GPIO pin claimed (OUTPUT)",
            pin=pin,
            component=component,
        )

    def release(self, pin: int, original_mode: PinMode) -> PinMode:
        """
        Restore the pin's original mode and unregister it

        Returns:
            Mode the line is left in (INPUT unless original_mode was OUTPUT)

        Raises:
            HardwareIOFailure: If the driver fails to reset the pin
        """
        component = self._registry.pop(pin, None)
        if component is None:
            log.warn("Release of unclaimed GPIO pin ignored", pin=pin)
            return self.read_mode(pin)

        if original_mode is PinMode.OUTPUT:
            log.info("GPIO pin left as output", pin=pin, component=component)
            return PinMode.OUTPUT

        if original_mode is not PinMode.INPUT:
            log.warn(
                "GPIO pin original function cannot be re-applied, resetting to input",
                pin=pin,
                original_mode=original_mode.name,
            )

        try:
            self._gpio.cleanup(pin)
        except (RuntimeError, ValueError) as e:
            raise HardwareIOFailure(pin, e) from e

        log.info("GPIO pin restored", pin=pin, component=component, mode=PinMode.INPUT.name)
        return PinMode.INPUT


    # -------------------------------
    # IO
    # -------------------------------

    def read(self, pin: int) -> PinLevel:
        try:
            return PinLevel.HIGH if self._gpio.input(pin) else PinLevel.LOW
        except (RuntimeError, ValueError) as e:
            raise HardwareIOFailure(pin, e) from e

    def write(self, pin: int, level: PinLevel) -> None:
        value = self._gpio.HIGH if level is PinLevel.HIGH else self._gpio.LOW
        try:
            self._gpio.output(pin, value)
        except (RuntimeError, ValueError) as e:
            raise HardwareIOFailure(pin, e) from e


    # -------------------------------
    # Debug
    # -------------------------------

    def get_registry(self) -> Dict[int, str]:
        """
        Get current pin allocations (for debugging)

        Returns:
            Dict mapping pin number to component name
        """
        return self._registry.copy()


    # -------------------------------
    # Internals
    # -------------------------------

    def _check_range(self, pin: int) -> None:
        if pin not in BCM_PIN_RANGE:
            raise PinUnavailable(pin, f"pin out of range {BCM_PIN_RANGE.start}..{BCM_PIN_RANGE.stop - 1}")

    def _check_available(self, pin: int, component: str) -> None:
        """
        Check if pin is available for registration

        Raises:
            PinUnavailable: If pin out of range or already registered
        """
        self._check_range(pin)
        if pin in self._registry:
            existing_owner = self._registry[pin]
            log.error(
                "GPIO pin conflict detected",
                pin=pin,
                requested_by=component,
                owner=existing_owner,
            )
            raise PinUnavailable(pin, f"already claimed by {existing_owner}")
