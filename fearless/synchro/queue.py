"""Unbounded first-in first-out queue that many threads may share."""

import threading
from collections import deque


class Queue:
    """Thread-safe FIFO queue.

    ``deq`` returns None when the queue is empty, so None should not be
    stored as a value.
    """

    __slots__ = ("_items", "_lock")

    def __init__(self):
        self._items = deque()
        self._lock = threading.Lock()

    def enq(self, val):
        """Append ``val`` to the back of the queue."""
        with self._lock:
            self._items.append(val)

    def deq(self):
        """Remove and return the front value, or None if the queue is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.popleft()