"""Counting semaphore with wait/signal operations."""

import threading


class Semaphore:
    """Counting semaphore starting with ``capacity`` permits.

    ``wait`` blocks until a permit is free; ``signal`` returns one and has
    no upper bound.
    """

    __slots__ = ("_permits",)

    def __init__(self, capacity):
        self._permits = threading.Semaphore(capacity)

    def wait(self):
        """Take a permit, blocking until one is available."""
        self._permits.acquire()

    def signal(self):
        """Return a permit."""
        self._permits.release()

    def __enter__(self):
        self.wait()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.signal()
        return False