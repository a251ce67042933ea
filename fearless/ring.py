"""Fixed-size ring shared by a writer and a reader, and the same exchange over a channel."""

import argparse
import queue
import threading
import time

_MASK32 = 0xFFFF_FFFF
_PUT_TIMEOUT = 0.05


class Ring:
    """Ring of ``capacity`` optional slots with a count of occupied ones."""

    __slots__ = ("size", "data")

    def __init__(self, capacity):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, not {capacity!r}")
        self.size = 0
        self.data = [None] * capacity

    @property
    def capacity(self):
        """Number of slots in the ring."""
        return len(self.data)

    def is_full(self):
        """Return True when the count of occupied slots equals the capacity."""
        return self.size == len(self.data)

    def emplace(self, offset, val):
        """Store ``val`` at ``offset``, count it, and return what was there."""
        self.size += 1
        old, self.data[offset] = self.data[offset], val
        return old

    def displace(self, offset):
        """Empty the slot at ``offset`` and return what it held, or None."""
        old, self.data[offset] = self.data[offset], None
        if old is not None:
            self.size -= 1
        return old


def writer(ring, lock, stop):
    """Write 0, 1, 2, ... into ``ring`` in order until ``stop`` is set.

    Raises RuntimeError if a slot about to be written is still occupied.
    """
    offset = 0
    cur = 0
    while not stop.is_set():
        with lock:
            full = ring.is_full()
            if not full:
                old = ring.emplace(offset, cur)
                if old is not None:
                    raise RuntimeError(f"slot {offset} still held {old}")
                cur = (cur + 1) & _MASK32
                offset = (offset + 1) % ring.capacity
        if full:
            time.sleep(0)


def reader(read_limit, ring, lock):
    """Read ``read_limit`` values from ``ring``, checking they come in order.

    Returns the number of values read; raises RuntimeError on a value out
    of sequence.
    """
    offset = 0
    cur = 0
    while cur < read_limit:
        with lock:
            num = ring.displace(offset)
            if num is not None:
                if num != cur:
                    raise RuntimeError(f"expected {cur}, read {num}")
                cur = (cur + 1) & _MASK32
                offset = (offset + 1) % ring.capacity
        if num is None:
            time.sleep(0)
    return cur


def channel_writer(chan, stop):
    """Put 0, 1, 2, ... on the bounded queue ``chan`` until ``stop`` is set."""
    cur = 0
    while not stop.is_set():
        try:
            chan.put(cur, timeout=_PUT_TIMEOUT)
        except queue.Full:
            continue
        cur = (cur + 1) & _MASK32


def channel_reader(read_limit, chan):
    """Take ``read_limit`` values from ``chan``, checking they come in order.

    Returns the number of values read; raises RuntimeError on a value out
    of sequence.
    """
    cur = 0
    while cur < read_limit:
        num = chan.get()
        if num != cur:
            raise RuntimeError(f"expected {cur}, read {num}")
        cur = (cur + 1) & _MASK32
    return cur


def _run_with_writer(target, args, stop, read):
    errors = []

    def guarded():
        try:
            target(*args)
        except Exception as exc:
            errors.append(exc)
            stop.set()

    thread = threading.Thread(target=guarded, daemon=True)
    thread.start()
    try:
        count = read()
    finally:
        stop.set()
        thread.join()
    if errors:
        raise errors[0]
    return count


def run_ring(capacity, read_limit):
    """Run a writer thread and a reader over a locked ring; return values read."""
    ring = Ring(capacity)
    lock = threading.Lock()
    stop = threading.Event()
    return _run_with_writer(
        writer, (ring, lock, stop), stop, lambda: reader(read_limit, ring, lock)
    )


def run_channel(capacity, read_limit):
    """Run a writer thread and a reader over a bounded queue; return values read."""
    if capacity < 1:
        raise ValueError(f"capacity must be positive, not {capacity!r}")
    chan = queue.Queue(maxsize=capacity)
    stop = threading.Event()
    return _run_with_writer(
        channel_writer, (chan, stop), stop, lambda: channel_reader(read_limit, chan)
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pass a sequence from writer to reader.")
    parser.add_argument("mode", nargs="?", choices=("ring", "channel"), default="ring")
    parser.add_argument("--capacity", type=int, default=10)
    parser.add_argument("--read-limit", type=int, default=1_000_000)
    args = parser.parse_args(argv)
    runner = run_ring if args.mode == "ring" else run_channel
    runner(args.capacity, args.read_limit)
    return 0