"""Shared in-memory host for core tests."""

from __future__ import annotations

import pytest

from core.host import HOST_EVENTS, ArrayTimeRanges, EventHub


class FakeHost:
    """Deterministic stand-in for a media player; positions in seconds."""

    def __init__(self, *, duration: float = 3600.0, position: float = 0.0, buffered=()):
        self.position = float(position)
        self.duration = float(duration)
        self.buffered = ArrayTimeRanges(buffered)
        self.playing = False
        self.play_calls = 0
        self.pause_calls = 0
        self.duration_calls = 0
        self.seeks: list[float] = []
        self.events = EventHub(HOST_EVENTS)

    def get_position(self) -> float:
        return self.position

    def set_position(self, seconds: float) -> None:
        self.seeks.append(seconds)
        self.position = seconds

    def get_duration(self) -> float:
        self.duration_calls += 1
        return self.duration

    def get_buffered_ranges(self) -> ArrayTimeRanges:
        return self.buffered

    def subscribe(self, event, handler) -> None:
        self.events.subscribe(event, handler)

    def unsubscribe(self, event, handler) -> None:
        self.events.unsubscribe(event, handler)

    def play(self) -> None:
        self.play_calls += 1
        self.playing = True

    def pause(self) -> None:
        self.pause_calls += 1
        self.playing = False

    def fire(self, event: str) -> None:
        self.events.emit(event)


@pytest.fixture
def make_host():
    def _make(**kwargs) -> FakeHost:
        return FakeHost(**kwargs)

    return _make
