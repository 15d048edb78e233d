"""Buffered ranges remapped into window coordinates."""
from __future__ import annotations

from typing import Iterator

import numpy as np

from core.host import TimeRanges
from core.position import clamp_to_window
from core.window_config import DerivedWindow


class BufferedRangeView:
    """
    Same indexable shape as the host ranges; every bound is shifted by the
    window start and clamped to ``[0, computed_duration]`` so a progress bar
    never draws outside the visible window.
    """

    __slots__ = ("buffered", "_window")

    def __init__(self, buffered: TimeRanges, window: DerivedWindow):
        self.buffered = buffered
        self._window = window

    def __len__(self) -> int:
        return len(self.buffered)

    @property
    def length(self) -> int:
        return len(self.buffered)

    def start(self, index: int) -> float:
        return clamp_to_window(self.buffered.start(index), self._window)

    def end(self, index: int) -> float:
        return clamp_to_window(self.buffered.end(index), self._window)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for i in range(len(self)):
            yield self.start(i), self.end(i)

    def as_array(self) -> np.ndarray:
        n = len(self.buffered)
        if n == 0:
            return np.zeros((0, 2), dtype=float)
        raw = np.array(
            [(self.buffered.start(i), self.buffered.end(i)) for i in range(n)],
            dtype=float,
        )
        return clamp_to_window(raw, self._window)
