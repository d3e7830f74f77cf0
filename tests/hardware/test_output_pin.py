#!/usr/bin/env python3
"""
Unit tests for OutputPin and claim_output_pin

Tests cover:
- Claiming (mode, level, registry, exclusivity)
- Output operations (toggle, set_high, set_low)
- Scoped release (normal exit, error unwinding, idempotence)
"""

from unittest.mock import MagicMock

import pytest

from hardware.gpio import (
    HardwareIOFailure,
    MockGPIOPeripheral,
    OutputPin,
    PinUnavailable,
    claim_output_pin,
)
from models.enums import PinLevel, PinMode


# ============================================================================
# Claiming
# ============================================================================

class TestClaimOutputPin:

    def test_claim_configures_output_low(self, mock_peripheral):
        pin = claim_output_pin(mock_peripheral, 23)

        assert pin.pin == 23
        assert pin.mode is PinMode.OUTPUT
        assert pin.level is PinLevel.LOW
        assert pin.original_mode is PinMode.INPUT
        assert mock_peripheral.mode_of(23) is PinMode.OUTPUT
        assert mock_peripheral.get_registry() == {23: "BlinkController"}

    def test_second_claim_of_same_pin_is_rejected(self, mock_peripheral):
        first = claim_output_pin(mock_peripheral, 23)

        with pytest.raises(PinUnavailable) as exc_info:
            claim_output_pin(mock_peripheral, 23, component="Other")

        assert exc_info.value.pin == 23
        assert "already claimed by BlinkController" in str(exc_info.value)
        # First owner still holds the line
        assert not first.released
        assert mock_peripheral.get_registry() == {23: "BlinkController"}

    def test_pin_can_be_claimed_again_after_release(self, mock_peripheral):
        with claim_output_pin(mock_peripheral, 23):
            pass

        again = claim_output_pin(mock_peripheral, 23)
        assert again.mode is PinMode.OUTPUT

    @pytest.mark.parametrize("pin_id", [-1, 28, 40])
    def test_out_of_range_pin_mutates_nothing(self, mock_peripheral, pin_id):
        with pytest.raises(PinUnavailable) as exc_info:
            claim_output_pin(mock_peripheral, pin_id)

        assert str(exc_info.value).startswith(f"Can't access GPIO pin {pin_id} (")
        assert mock_peripheral.mode_changes == []
        assert mock_peripheral.get_registry() == {}


# ============================================================================
# Output
# ============================================================================

class TestOutputOperations:

    def test_toggle_alternates_levels(self, mock_peripheral):
        pin = claim_output_pin(mock_peripheral, 23)

        assert pin.toggle() is PinLevel.HIGH
        assert pin.toggle() is PinLevel.LOW
        assert pin.toggle() is PinLevel.HIGH
        assert mock_peripheral.writes == [
            (23, PinLevel.HIGH),
            (23, PinLevel.LOW),
            (23, PinLevel.HIGH),
        ]

    def test_set_high_and_low(self, mock_peripheral):
        pin = claim_output_pin(mock_peripheral, 23)

        pin.set_high()
        assert mock_peripheral.read(23) is PinLevel.HIGH
        pin.set_low()
        assert mock_peripheral.read(23) is PinLevel.LOW
        assert pin.level is PinLevel.LOW

    def test_failed_write_keeps_previous_level(self):
        peripheral = MockGPIOPeripheral(fail_writes_after=1)
        pin = claim_output_pin(peripheral, 23)
        pin.toggle()

        with pytest.raises(HardwareIOFailure):
            pin.toggle()
        assert pin.level is PinLevel.HIGH

    def test_write_after_release_fails(self, mock_peripheral):
        pin = claim_output_pin(mock_peripheral, 23)
        pin.release()

        with pytest.raises(HardwareIOFailure, match="pin already released"):
            pin.set_low()


# ============================================================================
# Release
# ============================================================================

class TestRelease:

    def test_scope_end_restores_original_mode(self, mock_peripheral):
        with claim_output_pin(mock_peripheral, 23) as pin:
            pin.toggle()

        assert pin.released
        assert pin.mode is PinMode.INPUT
        assert mock_peripheral.mode_of(23) is PinMode.INPUT
        assert mock_peripheral.get_registry() == {}

    def test_alternate_function_is_restored(self):
        peripheral = MockGPIOPeripheral(initial_modes={23: PinMode.ALT})

        with claim_output_pin(peripheral, 23):
            pass

        assert peripheral.mode_of(23) is PinMode.ALT

    def test_release_happens_once(self, mock_peripheral):
        with claim_output_pin(mock_peripheral, 23) as pin:
            pin.release()
            pin.release()

        # One change to OUTPUT on claim, one back to INPUT on release
        assert mock_peripheral.mode_changes == [(23, PinMode.OUTPUT), (23, PinMode.INPUT)]

    def test_scope_end_on_error_restores_and_reraises(self):
        peripheral = MockGPIOPeripheral(fail_writes_after=0)

        with pytest.raises(HardwareIOFailure):
            with claim_output_pin(peripheral, 23) as pin:
                pin.toggle()

        assert peripheral.mode_of(23) is PinMode.INPUT
        assert peripheral.get_registry() == {}

    def test_reset_on_release_false_leaves_output(self, mock_peripheral):
        with claim_output_pin(mock_peripheral, 23, reset_on_release=False) as pin:
            pass

        assert pin.mode is PinMode.OUTPUT
        assert mock_peripheral.mode_of(23) is PinMode.OUTPUT
        assert mock_peripheral.get_registry() == {}

    def test_restore_failure_does_not_mask_original_error(self):
        peripheral = MagicMock()
        peripheral.release.side_effect = HardwareIOFailure(23, "cleanup failed")
        pin = OutputPin(peripheral, 23, PinMode.INPUT)

        with pytest.raises(ValueError, match="boom"):
            with pin:
                raise ValueError("boom")

        peripheral.release.assert_called_once_with(23, PinMode.INPUT)

    def test_restore_failure_on_normal_exit_propagates(self):
        peripheral = MagicMock()
        peripheral.release.side_effect = HardwareIOFailure(23, "cleanup failed")

        with pytest.raises(HardwareIOFailure, match="cleanup failed"):
            with OutputPin(peripheral, 23, PinMode.INPUT):
                pass
