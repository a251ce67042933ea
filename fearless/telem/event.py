"""Events passed between the stages of the telemetry pipeline."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Telemetry:
    """A named measurement."""

    name: str
    value: int


@dataclass(frozen=True)
class Flush:
    """Request that every downstream stage report what it holds."""


def broadcast(chans, event):
    """Put ``event`` on every channel in ``chans``."""
    for chan in chans:
        chan.put(event)


def _receive(recv):
    """Yield events from ``recv`` until it is closed.

    ``recv`` is either a queue, read with ``get``, or any iterable. A None
    item marks the end of the stream in both cases.
    """
    source = iter(recv.get, None) if hasattr(recv, "get") else recv
    for event in source:
        if event is None:
            return
        yield event