"""Pipeline stages that pass on only some of the telemetry they receive."""

from abc import ABC, abstractmethod

from fearless.telem.event import Flush, Telemetry, _receive, broadcast


class Filter(ABC):
    """A stage that decides which telemetry to forward."""

    @abstractmethod
    def process(self, event):
        """Return the list of telemetry to forward for ``event``."""

    def run(self, recv, chans):
        """Forward events from ``recv`` to ``chans`` until ``recv`` closes.

        Flush events are always forwarded; telemetry goes through
        ``process``. When the input ends, every output is closed.
        """
        for event in _receive(recv):
            if isinstance(event, Flush):
                broadcast(chans, event)
            elif isinstance(event, Telemetry):
                for telem in self.process(event):
                    broadcast(chans, telem)
            else:
                raise TypeError(f"unexpected event {event!r}")
        for chan in chans:
            chan.put(None)


class HighFilter(Filter):
    """Forward telemetry whose value is at least ``limit``."""

    def __init__(self, limit):
        self.limit = limit

    def process(self, event):
        return [event] if event.value >= self.limit else []


class LowFilter(Filter):
    """Forward telemetry whose value is at most ``limit``."""

    def __init__(self, limit):
        self.limit = limit

    def process(self, event):
        return [event] if event.value <= self.limit else []