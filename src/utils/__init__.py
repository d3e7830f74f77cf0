"""
Utility functions for the GPIO blink controller
"""

from .logger import get_logger, configure_logger

__all__ = [
    'get_logger',
    'configure_logger',
]
