"""Last-in first-out stack that many threads may share."""

import threading


class Stack:
    """Thread-safe LIFO stack; ``pop`` returns None when empty."""

    __slots__ = ("_items", "_lock")

    def __init__(self):
        self._items = []
        self._lock = threading.Lock()

    def push(self, t):
        """Put ``t`` on top of the stack."""
        with self._lock:
            self._items.append(t)

    def pop(self):
        """Remove and return the top value, or None if the stack is empty."""
        with self._lock:
            if not self._items:
                return None
            return self._items.pop()