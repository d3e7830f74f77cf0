from .errors import GPIOError, PeripheralUnavailable, PinUnavailable, HardwareIOFailure
from .gpio_peripheral_interface import IGPIOPeripheral, BCM_PIN_RANGE
from .gpio_peripheral_hardware import HardwareGPIOPeripheral
from .gpio_peripheral_mock import MockGPIOPeripheral
from .gpio_peripheral_factory import acquire_peripheral
from .output_pin import OutputPin, claim_output_pin


__all__ = [
    "GPIOError",
    "PeripheralUnavailable",
    "PinUnavailable",
    "HardwareIOFailure",
    "IGPIOPeripheral",
    "BCM_PIN_RANGE",
    "HardwareGPIOPeripheral",
    "MockGPIOPeripheral",
    "acquire_peripheral",
    "OutputPin",
    "claim_output_pin",
]
