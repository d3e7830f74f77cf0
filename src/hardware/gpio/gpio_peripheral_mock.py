from typing import Dict, List, Optional, Tuple
from hardware.gpio.errors import PinUnavailable, HardwareIOFailure
from hardware.gpio.gpio_peripheral_interface import IGPIOPeripheral, BCM_PIN_RANGE
from models.enums import PinMode, PinLevel
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class MockGPIOPeripheral(IGPIOPeripheral):
    """
    In-memory peripheral for development hosts and tests.

    Every pin starts as INPUT/LOW unless initial_modes says otherwise.
    fail_writes_after=N lets the first N writes succeed and fails the rest.
    writes and mode_changes keep a history for assertions.
    """

    def __init__(
        self,
        initial_modes: Optional[Dict[int, PinMode]] = None,
        fail_writes_after: Optional[int] = None,
    ):
        self._registry: Dict[int, str] = {}  # pin -> component_name
        self._modes: Dict[int, PinMode] = {pin: PinMode.INPUT for pin in BCM_PIN_RANGE}
        self._modes.update(initial_modes or {})
        self._levels: Dict[int, PinLevel] = {}
        self.fail_writes_after = fail_writes_after

        self.writes: List[Tuple[int, PinLevel]] = []
        self.mode_changes: List[Tuple[int, PinMode]] = []
        log.info("Mock GPIO peripheral initialized")

    # -------------------------------
    # Registration
    # -------------------------------

    def read_mode(self, pin: int) -> PinMode:
        self._check_range(pin)
        return self._modes[pin]

    def claim_output(self, pin: int, component: str) -> None:
        self._check_available(pin, component)
        self._registry[pin] = component
        self._set_mode(pin, PinMode.OUTPUT)
        self._levels[pin] = PinLevel.LOW

    def release(self, pin: int, original_mode: PinMode) -> PinMode:
        if self._registry.pop(pin, None) is None:
            return self._modes[pin]
        if self._modes[pin] is not original_mode:
            self._set_mode(pin, original_mode)
        return original_mode

    # -------------------------------
    # IO
    # -------------------------------

    def read(self, pin: int) -> PinLevel:
        return self._levels.get(pin, PinLevel.LOW)

    def write(self, pin: int, level: PinLevel) -> None:
        if pin not in self._registry:
            raise HardwareIOFailure(pin, "The GPIO channel has not been set up as an OUTPUT")
        if self.fail_writes_after is not None and len(self.writes) >= self.fail_writes_after:
            raise HardwareIOFailure(pin, "simulated write failure")
        self._levels[pin] = level
        self.writes.append((pin, level))

    # -------------------------------
    # Debug
    # -------------------------------

    def get_registry(self) -> Dict[int, str]:
        return self._registry.copy()

    def mode_of(self, pin: int) -> PinMode:
        return self._modes[pin]

    # -------------------------------
    # Internals
    # -------------------------------

    def _set_mode(self, pin: int, mode: PinMode) -> None:
        self._modes[pin] = mode
        self.mode_changes.append((pin, mode))

    def _check_range(self, pin: int) -> None:
        if pin not in BCM_PIN_RANGE:
            raise PinUnavailable(pin, "The channel sent is invalid on a Raspberry Pi")

    def _check_available(self, pin: int, component: str) -> None:
        self._check_range(pin)
        if pin in self._registry:
            raise PinUnavailable(pin, f"already claimed by {self._registry[pin]}")
