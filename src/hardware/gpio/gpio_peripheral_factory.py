# factory.py
from typing import Optional
from runtime.runtime_info import RuntimeInfo
from hardware.gpio.errors import PeripheralUnavailable
from hardware.gpio.gpio_peripheral_interface import IGPIOPeripheral
from hardware.gpio.gpio_peripheral_hardware import HardwareGPIOPeripheral
from hardware.gpio.gpio_peripheral_mock import MockGPIOPeripheral
from models.enums import GPIOBackend
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)

# RPi.GPIO state is process-wide, so is the hardware pin registry
_hardware_peripheral: Optional[HardwareGPIOPeripheral] = None


def acquire_peripheral(backend: Optional[GPIOBackend] = None) -> IGPIOPeripheral:
    """
    Open the GPIO subsystem.

    Args:
        backend: GPIOBackend.HARDWARE (default) or GPIOBackend.MOCK

    Raises:
        PeripheralUnavailable: RPi.GPIO missing or failed to initialize
    """
    global _hardware_peripheral
    backend = backend or GPIOBackend.HARDWARE

    if backend is GPIOBackend.MOCK:
        return MockGPIOPeripheral()

    if _hardware_peripheral is not None:
        return _hardware_peripheral

    if not RuntimeInfo.has_gpio():
        raise PeripheralUnavailable("RPi.GPIO is not installed")
    if not RuntimeInfo.is_raspberry_pi():
        log.warn("Host does not report as a Raspberry Pi")

    _hardware_peripheral = HardwareGPIOPeripheral()
    return _hardware_peripheral
