"""Host media-player capability set and a small listener registry."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Protocol, Sequence

import numpy as np

LOG = logging.getLogger(__name__)

# Signals delivered by the host player.
METADATA_LOADED = "metadata-loaded"
POSITION_UPDATE = "position-update"
PLAY_REQUEST = "play-request"
BOUNDARY_ACKNOWLEDGED = "boundary-acknowledged"

# Signal produced by the windowed player.
WINDOW_ENDED = "window-ended"

HOST_EVENTS = (METADATA_LOADED, POSITION_UPDATE, PLAY_REQUEST, BOUNDARY_ACKNOWLEDGED)

Handler = Callable[..., None]


class TimeRanges(Protocol):
    """Indexable collection of ``[start, end)`` ranges in seconds."""

    def __len__(self) -> int:
        ...

    def start(self, index: int) -> float:
        ...

    def end(self, index: int) -> float:
        ...


class MediaHost(Protocol):
    def get_position(self) -> float:
        ...

    def set_position(self, seconds: float) -> None:
        ...

    def get_duration(self) -> float:
        ...

    def get_buffered_ranges(self) -> TimeRanges:
        ...

    def subscribe(self, event: str, handler: Handler) -> None:
        ...

    def unsubscribe(self, event: str, handler: Handler) -> None:
        ...

    def pause(self) -> None:
        ...

    def play(self) -> None:
        ...


class ArrayTimeRanges:
    """``TimeRanges`` backed by an ``(n, 2)`` float array."""

    __slots__ = ("_data",)

    def __init__(self, ranges: Iterable[Sequence[float]] | np.ndarray = ()) -> None:
        data = np.asarray(list(ranges) if not isinstance(ranges, np.ndarray) else ranges, dtype=float)
        if data.size == 0:
            data = np.zeros((0, 2), dtype=float)
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError("ranges must be pairs of (start, end)")
        self._data = data

    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for row in self._data:
            yield float(row[0]), float(row[1])

    def start(self, index: int) -> float:
        return float(self._data[index, 0])

    def end(self, index: int) -> float:
        return float(self._data[index, 1])

    def as_array(self) -> np.ndarray:
        return self._data.copy()


class EventHub:
    """Dispatch named events to handlers, in subscription order."""

    def __init__(self, events: Iterable[str]):
        self._handlers: dict[str, list[Handler]] = {name: [] for name in events}

    def subscribe(self, event: str, handler: Handler) -> None:
        handlers = self._handlers.get(event)
        if handlers is None:
            raise ValueError(f"unknown event {event!r}")
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        handlers = self._handlers.get(event)
        if handlers is None:
            raise ValueError(f"unknown event {event!r}")
        try:
            handlers.remove(handler)
        except ValueError:
            LOG.debug("Handler %r was not subscribed to %s", handler, event)

    def emit(self, event: str, *args) -> None:
        handlers = self._handlers.get(event)
        if handlers is None:
            raise ValueError(f"unknown event {event!r}")
        # Handlers may unsubscribe while dispatching.
        for handler in list(handlers):
            handler(*args)
