from typing import Protocol, Dict
from models.enums import PinMode, PinLevel

# BCM numbering exposes GPIO 0..27 on the 40-pin header
BCM_PIN_RANGE = range(0, 28)


class IGPIOPeripheral(Protocol):

    # -------------------------------
    # Registration
    # -------------------------------

    def read_mode(self, pin: int) -> PinMode:
        """Current electrical function of the pin, read before claiming it"""
        ...

    def claim_output(self, pin: int, component: str) -> None:
        """
        Register pin for exclusive use and configure it as output, level LOW.

        Raises:
            PinUnavailable: out of range, already claimed, or driver refused
        """
        ...

    def release(self, pin: int, original_mode: PinMode) -> PinMode:
        """Restore original_mode, drop the pin from the registry, return the mode applied"""
        ...


    # -------------------------------
    # IO
    # -------------------------------

    def read(self, pin: int) -> PinLevel:
        ...

    def write(self, pin: int, level: PinLevel) -> None:
        """
        Raises:
            HardwareIOFailure: driver rejected the write
        """
        ...


    # -------------------------------
    # Debug
    # -------------------------------

    def get_registry(self) -> Dict[int, str]:
        ...
