"""Rockets collecting fuel, oxidizer and astronauts from a random producer."""

import argparse
import sys
import threading
import time
from dataclasses import dataclass, field

from fearless.rng import XorShiftRng

_SEED = 2005
_KINDS = ("fuel", "oxidizer", "astronauts")
_NAMES = ("KSC", "VAB", "WSMR")


@dataclass
class Resources:
    """Availability flags for each resource kind, each with its own condition."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    available: dict = field(default_factory=lambda: dict.fromkeys(_KINDS, False))
    conditions: dict = field(init=False)

    def __post_init__(self):
        self.conditions = {kind: threading.Condition(self.lock) for kind in _KINDS}


def _say(out, text):
    (out if out is not None else sys.stdout).write(f"{text}\n")


def producer(resources, stop, seed=_SEED):
    """Offer one randomly chosen resource at a time until ``stop`` is set."""
    rng = XorShiftRng(seed)
    while not stop.is_set():
        with resources.lock:
            for kind in _KINDS:
                resources.available[kind] = False
            kind = _KINDS[rng.next_u32() % len(_KINDS)]
            resources.available[kind] = True
            resources.conditions[kind].notify_all()
        time.sleep(0)


def rocket(name, resources, all_go, lift_off, out=None):
    """Take fuel, oxidizer and astronauts in turn, then wait for the countdown."""
    for kind in _KINDS:
        with resources.lock:
            resources.conditions[kind].wait_for(lambda k=kind: resources.available[k])
            resources.available[kind] = False
            _say(out, f"{name:<6} ACQUIRE {kind.upper()}")
    all_go.wait()
    lift_off.wait()
    _say(out, f"{name:<6} LIFT OFF")


def launch(names=_NAMES, countdown=10, tick=1.0, out=None):
    """Prepare a rocket per name, count down once all are ready, and launch them."""
    names = list(names)
    all_go = threading.Barrier(len(names) + 1)
    lift_off = threading.Barrier(len(names) + 1)
    resources = Resources()
    stop = threading.Event()

    rockets = [
        threading.Thread(
            target=rocket, args=(name, resources, all_go, lift_off, out), daemon=True
        )
        for name in names
    ]
    for thread in rockets:
        thread.start()
    supplier = threading.Thread(target=producer, args=(resources, stop), daemon=True)
    supplier.start()

    try:
        all_go.wait()
        _say(out, f"T-{countdown + 1}")
        for i in range(countdown):
            _say(out, f"{countdown - i:>4}")
            time.sleep(tick)
        lift_off.wait()
        for thread in rockets:
            thread.join()
    finally:
        stop.set()
        supplier.join()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Launch rockets once supplied.")
    parser.add_argument("names", nargs="*", default=list(_NAMES))
    parser.add_argument("--countdown", type=int, default=10)
    parser.add_argument("--tick", type=float, default=1.0)
    args = parser.parse_args(argv)
    launch(args.names, args.countdown, args.tick)
    return 0