"""Spinning mutual-exclusion lock that owns the value it protects."""

import threading
import time


class SwapMutex:
    """Mutex that spins, yielding the processor, until it can take the lock."""

    __slots__ = ("_flag", "_value")

    def __init__(self, value):
        self._flag = threading.Lock()
        self._value = value

    def lock(self):
        """Spin until the lock is taken and return a guard holding it."""
        while not self._flag.acquire(blocking=False):
            time.sleep(0)
        return SwapMutexGuard(self)

    def _unlock(self):
        if not self._flag.locked():
            raise RuntimeError("unlocking a mutex that is not locked")
        self._flag.release()


class SwapMutexGuard:
    """Access to the value of a locked SwapMutex until released."""

    __slots__ = ("_mutex", "_held")

    def __init__(self, mutex):
        self._mutex = mutex
        self._held = True

    def _check(self):
        if not self._held:
            raise RuntimeError("guard has been released")

    @property
    def value(self):
        """The protected value."""
        self._check()
        return self._mutex._value

    @value.setter
    def value(self, new):
        self._check()
        self._mutex._value = new

    def release(self):
        """Give the lock back; the guard cannot be used afterwards."""
        self._check()
        self._held = False
        self._mutex._unlock()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._held:
            self.release()
        return False