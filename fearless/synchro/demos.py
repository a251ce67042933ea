"""Throughput demonstrations for the locks, queue and stack."""

import argparse
import itertools
import threading
import time

from fearless.synchro.queue import Queue
from fearless.synchro.semaphore import Semaphore
from fearless.synchro.swap_mutex import SwapMutex
from fearless.treiber import Stack


class StatusBoard:
    """Per-worker busy flags and completed-iteration counters."""

    def __init__(self, threads):
        self.status = [False] * threads
        self.counts = [0] * threads

    def work(self, worker_id, gate, stop):
        """Repeatedly pass through ``gate`` until ``stop`` is set.

        ``gate`` is a SwapMutex or any context manager, such as a lock or a
        Semaphore.
        """
        while not stop.is_set():
            guard = gate.lock() if isinstance(gate, SwapMutex) else gate
            with guard:
                self.status[worker_id] = True
                self.counts[worker_id] += 1
                self.status[worker_id] = False

    def snapshot(self):
        """Return copies of the flags and counters as they are now."""
        return tuple(self.status), tuple(self.counts)


def format_status(status, counts, previous):
    """Render one line of flags and per-second counts for every worker."""
    cells = "".join(
        f" {str(flag).lower():>5}; {count - prev:010}/sec |"
        for flag, count, prev in zip(status, counts, previous)
    )
    return "|" + cells


def _iterations(iterations):
    return itertools.count() if iterations is None else range(iterations)


def _spin(threads, body):
    results = [0] * threads

    def worker(idx):
        results[idx] = body()

    pool = [threading.Thread(target=worker, args=(i,)) for i in range(threads)]
    for thread in pool:
        thread.start()
    for thread in pool:
        thread.join()
    return sum(results)


def queue_spin(queue, threads, iterations):
    """Have each thread enqueue then dequeue ``iterations`` times.

    Returns the number of dequeues that found a value. With ``iterations``
    None the threads never stop.
    """

    def body():
        found = 0
        for i in _iterations(iterations):
            queue.enq(i)
            found += queue.deq() is not None
        return found

    return _spin(threads, body)


def stack_spin(stack, threads, iterations):
    """Have each thread push then pop ``iterations`` times.

    Returns the number of pops that found a value. With ``iterations`` None
    the threads never stop.
    """

    def body():
        found = 0
        for i in _iterations(iterations):
            stack.push((i, i, i))
            found += stack.pop() is not None
        return found

    return _spin(threads, body)


_GATES = {
    "mutex": threading.Lock,
    "spin-mutex": lambda: SwapMutex(None),
    "semaphore": lambda: Semaphore(1),
}


def _status_demo(gate, threads, rounds):
    board = StatusBoard(threads)
    stop = threading.Event()
    workers = [
        threading.Thread(target=board.work, args=(i, gate, stop), daemon=True)
        for i in range(threads)
    ]
    for thread in workers:
        thread.start()
    previous = (0,) * threads
    for _ in _iterations(rounds):
        time.sleep(1.0)
        status, counts = board.snapshot()
        print(format_status(status, counts, previous))
        previous = counts
    stop.set()
    for thread in workers:
        thread.join()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a concurrency demonstration.")
    parser.add_argument(
        "demo", choices=sorted(_GATES) + ["queue-spin", "stack-spin"]
    )
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument("--iterations", type=int, default=None)
    args = parser.parse_args(argv)

    if args.demo in _GATES:
        _status_demo(_GATES[args.demo](), args.threads, args.rounds)
    elif args.demo == "queue-spin":
        print(queue_spin(Queue(), args.threads, args.iterations))
    else:
        print(stack_spin(Stack(), args.threads, args.iterations))
    return 0