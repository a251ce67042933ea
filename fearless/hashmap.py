"""Two deliberately simple maps: a direct-indexed byte map and a sorted-hash map."""

from bisect import bisect_left

_MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_U8_SLOTS = 256


def make_hash(hasher, key):
    """Hash ``key`` with ``hasher`` and fold the result into 64 unsigned bits."""
    return hasher(key) & _MASK64


class HashMapU8:
    """Map keyed by integers 0..255, stored in a fixed table of 256 slots."""

    __slots__ = ("_data",)

    def __init__(self):
        self._data = [None] * _U8_SLOTS

    @staticmethod
    def _check(k):
        if not 0 <= k < _U8_SLOTS:
            raise ValueError(f"key {k!r} is outside 0..255")

    def insert(self, k, v):
        """Store ``v`` under ``k`` and return the previous value, or None."""
        self._check(k)
        old, self._data[k] = self._data[k], v
        return old

    def get(self, k):
        """Return the value stored under ``k``, or None."""
        self._check(k)
        return self._data[k]


class HashMap:
    """Map kept as a list of entries sorted by key hash.

    Entries are told apart by hash alone: two keys with the same hash share
    a slot, and inserting the second replaces the first one's value.
    """

    __slots__ = ("_hasher", "_hashes", "_entries")

    def __init__(self, hasher=None):
        self._hasher = hasher if hasher is not None else hash
        self._hashes = []
        self._entries = []

    def insert(self, k, v):
        """Store ``v`` under ``k`` and return the value it replaced, or None."""
        h = make_hash(self._hasher, k)
        idx = bisect_left(self._hashes, h)
        if idx < len(self._hashes) and self._hashes[idx] == h:
            stored_key, old = self._entries[idx]
            self._entries[idx] = (stored_key, v)
            return old
        self._hashes.insert(idx, h)
        self._entries.insert(idx, (k, v))
        return None

    def get(self, k):
        """Return the value whose key hashes like ``k``, or None."""
        h = make_hash(self._hasher, k)
        idx = bisect_left(self._hashes, h)
        if idx < len(self._hashes) and self._hashes[idx] == h:
            return self._entries[idx][1]
        return None

    def __len__(self):
        return len(self._entries)