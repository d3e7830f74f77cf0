"""
Shutdown intent shared between the signal handler and the blink loop.
"""

import threading


class ShutdownIntent:
    """
    One-way stop flag.

    Starts as "continue". request_stop() flips it to "stop" and nothing flips
    it back. The signal handler only writes, the blink loop only reads.

    threading.Event gives a set()/is_set() pair that never tears and is
    visible across contexts without extra locking. The loop never calls
    wait(), so the handler cannot contend with it for the Event's lock.
    """

    def __init__(self):
        self._stop = threading.Event()

    def request_stop(self) -> None:
        """Idempotent; safe to call from a signal handler."""
        self._stop.set()

    @property
    def stop_requested(self) -> bool:
        return self._stop.is_set()

    def __repr__(self) -> str:
        return f"ShutdownIntent({'stop' if self.stop_requested else 'continue'})"
