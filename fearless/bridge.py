"""Two sides sharing a one-lane bridge guarded by a mutex."""

import argparse
import enum
import itertools
import threading
import time
from dataclasses import dataclass

from fearless.synchro.swap_mutex import SwapMutex

_MAX_ON_BRIDGE = 5


class Side(enum.Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self):
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass(frozen=True)
class Bridge:
    """Bridge state: empty when ``side`` is None, else ``count`` heading to ``side``."""

    side: Side | None = None
    count: int = 0


def step(bridge, side):
    """Apply one move by the thread on ``side``.

    Returns the new state and whether that thread took a traveller off the
    bridge.
    """
    outgoing = side.opposite
    if bridge.side is None:
        return Bridge(outgoing, 1), False
    if bridge.side is outgoing:
        if bridge.count < _MAX_ON_BRIDGE:
            return Bridge(outgoing, bridge.count + 1), False
        return bridge, False
    if bridge.count == 0:
        return Bridge(), False
    return Bridge(side, bridge.count - 1), True


def run_bridge(mutex, seconds):
    """Run both sides against ``mutex`` for ``seconds``; return transfers per side.

    ``mutex`` is a SwapMutex holding a Bridge.
    """
    stop = threading.Event()
    transfers = {side: 0 for side in Side}

    def crossing(side):
        moved = 0
        while not stop.is_set():
            with mutex.lock() as guard:
                guard.value, transferred = step(guard.value, side)
            moved += transferred
        transfers[side] = moved

    threads = [threading.Thread(target=crossing, args=(side,)) for side in Side]
    for thread in threads:
        thread.start()
    time.sleep(seconds)
    stop.set()
    for thread in threads:
        thread.join()
    return transfers


def main(argv=None):
    parser = argparse.ArgumentParser(description="Report bridge transfers.")
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument("--interval", type=float, default=1.0)
    args = parser.parse_args(argv)

    mutex = SwapMutex(Bridge())
    rounds = itertools.count() if args.rounds is None else range(args.rounds)
    for _ in rounds:
        transfers = run_bridge(mutex, args.interval)
        print(
            "Transfers per second:\n"
            f"    LHS: {transfers[Side.LEFT]}\n"
            f"    RHS: {transfers[Side.RIGHT]}"
        )
    return 0