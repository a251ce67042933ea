"""Pipeline stages that summarise telemetry and report it on flush."""

from abc import ABC, abstractmethod
from bisect import bisect_right
from dataclasses import dataclass
from itertools import pairwise

from fearless.telem.event import Flush, Telemetry, _receive

_REPORT_QUANTILES = (0.0, 0.25, 0.5, 0.75, 0.9, 0.99)


def _format_float(x):
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


@dataclass
class _Entry:
    value: object
    g: int
    delta: int


class CKMS:
    """Streaming quantile summary with a bounded rank error."""

    def __init__(self, error):
        self._error = min(max(error, 1e-10), 1.0)
        self._threshold = max(int(1.0 / (2.0 * self._error)), 1)
        self._inserts = 0
        self._n = 0
        self._samples = []
        self._values = []

    def _invariant(self, rank):
        return max(int(2.0 * self._error * rank), 1)

    def insert(self, value):
        """Add one observation to the summary."""
        self._n += 1
        idx = bisect_right(self._values, value)
        if idx == 0 or idx == len(self._samples):
            delta = 0
        else:
            rank = sum(entry.g for entry in self._samples[:idx])
            delta = self._invariant(rank) - 1
        self._samples.insert(idx, _Entry(value, 1, delta))
        self._values.insert(idx, value)

        self._inserts = (self._inserts + 1) % self._threshold
        if self._inserts == 0:
            self._compress()

    def _compress(self):
        samples = self._samples
        if len(samples) < 3:
            return
        rank = samples[0].g
        i = 1
        while i < len(samples) - 1:
            cur, nxt = samples[i], samples[i + 1]
            if cur.g + nxt.g + nxt.delta <= self._invariant(rank):
                nxt.g += cur.g
                del samples[i]
                del self._values[i]
            else:
                rank += cur.g
                i += 1

    def query(self, q):
        """Return ``(rank, value)`` approximating quantile ``q``, or None if empty."""
        if not self._samples:
            return None
        nphi = q * self._n
        bound = nphi + self._invariant(nphi) / 2.0
        rank = 0
        for prev, cur in pairwise(self._samples):
            rank += prev.g
            if rank + cur.g + cur.delta > bound:
                return rank, prev.value
        return self._n, self._samples[-1].value

    def __len__(self):
        return self._n


class Egress(ABC):
    """A final stage that collects telemetry and reports on flush."""

    @abstractmethod
    def deliver(self, event):
        """Take in one telemetry event."""

    @abstractmethod
    def report(self):
        """Print a summary if anything arrived since the last one; return its lines."""

    def run(self, recv):
        """Consume events from ``recv`` until it closes."""
        for event in _receive(recv):
            if isinstance(event, Telemetry):
                self.deliver(event)
            elif isinstance(event, Flush):
                self.report()
            else:
                raise TypeError(f"unexpected event {event!r}")


@dataclass
class _Average:
    n: int = 0
    cma: float = 0.0


class CMAEgress(Egress):
    """Keep a cumulative moving average per telemetry name."""

    def __init__(self):
        self._data = {}
        self._new_data = False

    def deliver(self, event):
        self._new_data = True
        avg = self._data.setdefault(event.name, _Average())
        avg.n += 1
        avg.cma += (event.value - avg.cma) / avg.n

    def report(self):
        if not self._new_data:
            return []
        lines = [f"[CMA] {name} {_format_float(avg.cma)}" for name, avg in self._data.items()]
        for line in lines:
            print(line)
        self._new_data = False
        return lines


class CKMSEgress(Egress):
    """Keep a quantile summary per telemetry name."""

    def __init__(self, error):
        self.error = error
        self._data = {}
        self._new_data = False

    def deliver(self, event):
        self._new_data = True
        summary = self._data.get(event.name)
        if summary is None:
            summary = self._data[event.name] = CKMS(self.error)
        summary.insert(event.value)

    def report(self):
        if not self._new_data:
            return []
        lines = [
            f"[CKMS] {name} {_format_float(q)}:{summary.query(q)[1]}"
            for name, summary in self._data.items()
            for q in _REPORT_QUANTILES
        ]
        for line in lines:
            print(line)
        self._new_data = False
        return lines