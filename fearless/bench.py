"""Random insert/lookup workloads over the simple maps and a plain dict."""

import argparse
from dataclasses import dataclass

from fearless.hashmap import HashMap, HashMapU8
from fearless.rng import XorShiftRng

SEED = 1981
_OPERATIONS = 100_000


@dataclass
class WorkloadCounts:
    """Outcome tallies of a workload run."""

    insert_empty: int = 0
    insert_present: int = 0
    get_fail: int = 0
    get_success: int = 0


class _StandardMap:
    """Dict presented with the insert/get interface of the other maps."""

    __slots__ = ("_data",)

    def __init__(self):
        self._data = {}

    def insert(self, k, v):
        old = self._data.get(k)
        self._data[k] = v
        return old

    def get(self, k):
        return self._data.get(k)


def workload(hash_map, operations, key_bits):
    """Run ``operations`` random inserts or lookups against ``hash_map``.

    Keys are drawn as 8- or 16-bit integers depending on ``key_bits``; the
    random stream is fixed so that every map sees the same sequence.
    """
    rng = XorShiftRng(SEED)
    if key_bits == 8:
        next_key = rng.next_u8
    elif key_bits == 16:
        next_key = rng.next_u16
    else:
        raise ValueError(f"key_bits must be 8 or 16, not {key_bits!r}")

    counts = WorkloadCounts()
    for _ in range(operations):
        key = next_key()
        if rng.next_bool():
            value = rng.next_u32()
            if hash_map.insert(key, value) is None:
                counts.insert_empty += 1
            else:
                counts.insert_present += 1
        elif hash_map.get(key) is None:
            counts.get_fail += 1
        else:
            counts.get_success += 1
    return counts


def insert_and_lookup_naive(n):
    """Byte-keyed workload of ``n`` operations on the sorted-hash map."""
    return workload(HashMap(), n, 8)


def insert_and_lookup_specialized(n):
    """Byte-keyed workload of ``n`` operations on the direct-indexed map."""
    return workload(HashMapU8(), n, 8)


def insert_and_lookup_standard(n):
    """Byte-keyed workload of ``n`` operations on a plain dict."""
    return workload(_StandardMap(), n, 8)


def format_counts(counts):
    """Render workload tallies as a short report."""
    return (
        "INSERT\n"
        f"  empty:   {counts.insert_empty}\n"
        f"  present: {counts.insert_present}\n"
        "LOOKUP\n"
        f"  fail:    {counts.get_fail}\n"
        f"  success: {counts.get_success}"
    )


_MAPS = {
    "naive": (HashMap, 16),
    "specialized": (HashMapU8, 8),
    "standard": (_StandardMap, 16),
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a random map workload.")
    parser.add_argument("map", nargs="?", choices=sorted(_MAPS), default="naive")
    parser.add_argument("--operations", type=int, default=_OPERATIONS)
    args = parser.parse_args(argv)

    factory, key_bits = _MAPS[args.map]
    print(format_counts(workload(factory(), args.operations, key_bits)))
    return 0