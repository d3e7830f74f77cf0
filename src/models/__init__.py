"""
Models package - enums and fixed configuration
"""

from .enums import LogLevel, LogCategory, PinMode, PinLevel, LoopState, GPIOBackend
from .config import BlinkConfig, DEFAULT_CONFIG

__all__ = [
    'LogLevel',
    'LogCategory',
    'PinMode',
    'PinLevel',
    'LoopState',
    'GPIOBackend',
    'BlinkConfig',
    'DEFAULT_CONFIG',
]
