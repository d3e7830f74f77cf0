#!/usr/bin/env python3
"""
Tests for acquire_peripheral()
"""

from unittest.mock import patch, sentinel

import pytest

import hardware.gpio.gpio_peripheral_factory as factory
from hardware.gpio import MockGPIOPeripheral, PeripheralUnavailable, acquire_peripheral
from models.enums import GPIOBackend


@pytest.fixture(autouse=True)
def fresh_hardware_slot(monkeypatch):
    monkeypatch.setattr(factory, "_hardware_peripheral", None)


def test_mock_backend():
    peripheral = acquire_peripheral(GPIOBackend.MOCK)

    assert isinstance(peripheral, MockGPIOPeripheral)
    assert peripheral.get_registry() == {}


def test_missing_driver_is_peripheral_unavailable():
    with patch.object(factory.RuntimeInfo, "has_gpio", return_value=False):
        with pytest.raises(PeripheralUnavailable) as exc_info:
            acquire_peripheral()

    assert str(exc_info.value) == "Can't access GPIO peripheral (RPi.GPIO is not installed)"


def test_hardware_peripheral_is_shared():
    with patch.object(factory.RuntimeInfo, "has_gpio", return_value=True), \
         patch.object(factory.RuntimeInfo, "is_raspberry_pi", return_value=True), \
         patch.object(factory, "HardwareGPIOPeripheral", return_value=sentinel.hw) as hw_cls:
        first = acquire_peripheral()
        second = acquire_peripheral(GPIOBackend.HARDWARE)

    assert first is sentinel.hw
    assert second is sentinel.hw
    hw_cls.assert_called_once_with()


def test_non_pi_host_is_logged(capsys):
    with patch.object(factory.RuntimeInfo, "has_gpio", return_value=True), \
         patch.object(factory.RuntimeInfo, "is_raspberry_pi", return_value=False), \
         patch.object(factory, "HardwareGPIOPeripheral", return_value=sentinel.hw):
        acquire_peripheral()

    assert "does not report as a Raspberry Pi" in capsys.readouterr().out
