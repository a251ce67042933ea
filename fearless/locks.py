"""Readers watching a wrapping counter through a condition variable, a
reader-writer lock, and per-reader channels."""

import argparse
import queue
import threading
import time
from contextlib import contextmanager

_CHANNEL_CAPACITY = 64
_U16_MODULUS = 1 << 16


def _check(total_readers, target_zeros, modulus):
    if total_readers < 1:
        raise ValueError(f"total_readers must be positive, not {total_readers!r}")
    if target_zeros < 0:
        raise ValueError(f"target_zeros must not be negative, not {target_zeros!r}")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, not {modulus!r}")


def _run_readers(total_readers, body):
    results = [None] * total_readers
    errors = []

    def worker(idx):
        try:
            results[idx] = body()
        except Exception as exc:
            errors.append(exc)

    threads = [
        threading.Thread(target=worker, args=(i,), daemon=True)
        for i in range(total_readers)
    ]
    for thread in threads:
        thread.start()
    return threads, results, errors


def condvar_example(total_readers, target_zeros, modulus):
    """Readers wake on each counter bump until each has seen zero ``target_zeros`` times.

    A writer thread bumps a counter wrapping at ``modulus`` and notifies all
    readers. Returns the number of wake-ups of each reader.
    """
    _check(total_readers, target_zeros, modulus)
    cond = threading.Condition()
    state = {"ready": False, "value": 0}
    stop = threading.Event()

    def read():
        total_zeros = 0
        total_wakes = 0
        while total_zeros < target_zeros:
            with cond:
                cond.wait_for(lambda: state["ready"])
                state["ready"] = False
                total_wakes += 1
                if state["value"] == 0:
                    total_zeros += 1
        return total_wakes

    def write():
        while not stop.is_set():
            with cond:
                state["value"] = (state["value"] + 1) % modulus
                state["ready"] = True
                cond.notify_all()
            time.sleep(0)

    threads, results, errors = _run_readers(total_readers, read)
    writer = threading.Thread(target=write, daemon=True)
    writer.start()
    for thread in threads:
        thread.join()
    stop.set()
    writer.join()
    if errors:
        raise errors[0]
    return results


class _RwLock:
    """Reader-writer lock whose ``try_read`` fails while a writer holds or awaits it."""

    def __init__(self):
        self._cond = threading.Condition()
        self._readers = 0
        self._writing = False

    def try_read(self):
        with self._cond:
            if self._writing:
                return False
            self._readers += 1
            return True

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._cond.wait_for(lambda: not self._writing)
            self._writing = True
            self._cond.wait_for(lambda: self._readers == 0)
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


def rwlock_example(total_readers, target_zeros, modulus):
    """Readers poll a counter with non-blocking read locks while it is written.

    The writer bumps the counter until it has wrapped to zero
    ``target_zeros`` times. Returns ``(failures, successes)`` of each
    reader's read attempts.
    """
    _check(total_readers, target_zeros, modulus)
    rw = _RwLock()
    resource = [0]

    def read():
        successes = 0
        failures = 0
        total_zeros = 0
        while total_zeros < target_zeros:
            if rw.try_read():
                try:
                    successes += 1
                    if resource[0] == 0:
                        total_zeros += 1
                finally:
                    rw.release_read()
            else:
                failures += 1
        return failures, successes

    threads, results, errors = _run_readers(total_readers, read)
    loops = 0
    while loops < target_zeros:
        with rw.write():
            resource[0] = (resource[0] + 1) % modulus
            if resource[0] == 0:
                loops += 1
        time.sleep(0)
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return results


def writer_example(total_readers, target_zeros, modulus):
    """Send every counter value to each reader over its own bounded channel.

    Returns the number of values each reader saw before counting
    ``target_zeros`` zeros.
    """
    _check(total_readers, target_zeros, modulus)
    chans = [queue.Queue(maxsize=_CHANNEL_CAPACITY) for _ in range(total_readers)]
    results = [None] * total_readers
    errors = []

    def read(idx):
        try:
            total_zeros = 0
            seen = 0
            while total_zeros < target_zeros:
                value = chans[idx].get()
                seen += 1
                if value == 0:
                    total_zeros += 1
            results[idx] = seen
        except Exception as exc:
            errors.append(exc)

    threads = [
        threading.Thread(target=read, args=(i,), daemon=True)
        for i in range(total_readers)
    ]
    for thread in threads:
        thread.start()

    loops = 0
    cur = 0
    while loops < target_zeros:
        cur = (cur + 1) % modulus
        for chan in chans:
            chan.put(cur)
        if cur == 0:
            loops += 1

    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return results


_EXAMPLES = {
    "condvar": condvar_example,
    "rwlock": rwlock_example,
    "writer": writer_example,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a lock example.")
    parser.add_argument("example", nargs="?", choices=sorted(_EXAMPLES), default="condvar")
    parser.add_argument("--readers", type=int, default=5)
    parser.add_argument("--zeros", type=int, default=100)
    parser.add_argument("--modulus", type=int, default=_U16_MODULUS)
    args = parser.parse_args(argv)
    for result in _EXAMPLES[args.example](args.readers, args.zeros, args.modulus):
        print(result)
    return 0