import signal
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hardware.gpio import MockGPIOPeripheral
from models.enums import LogLevel
from utils.logger import configure_logger


@pytest.fixture(autouse=True)
def plain_logger():
    """Uncolored INFO logging so captured output is easy to match."""
    configure_logger(min_level=LogLevel.INFO, use_colors=False)
    yield
    configure_logger(min_level=LogLevel.INFO, use_colors=True)


@pytest.fixture(autouse=True)
def restore_signal_handlers():
    """Put back the pytest process' own SIGINT/SIGTERM handlers."""
    saved = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)}
    yield
    for sig, handler in saved.items():
        signal.signal(sig, handler)


@pytest.fixture
def mock_peripheral():
    return MockGPIOPeripheral()


class FakeSleep:
    """
    Records sleep calls instead of blocking.

    on_call maps a 1-based call number to a callable run during that sleep,
    e.g. {1: lambda: signal.raise_signal(signal.SIGINT)}.
    """

    def __init__(self, on_call=None, limit=100):
        self.calls = []
        self._on_call = on_call or {}
        self._limit = limit

    def __call__(self, seconds):
        self.calls.append(seconds)
        action = self._on_call.get(len(self.calls))
        if action is not None:
            action()
        if len(self.calls) >= self._limit:
            raise AssertionError(f"loop did not stop after {self._limit} sleeps")


@pytest.fixture
def fake_sleep_factory():
    return FakeSleep
