"""
Hardware Layer

Low-level GPIO access only: peripheral backends (RPi.GPIO, mock) and the
scoped OutputPin handle.
"""
from .gpio import acquire_peripheral, claim_output_pin, OutputPin

__all__ = [
    "acquire_peripheral",
    "claim_output_pin",
    "OutputPin",
]
