"""Map playback positions between the underlying timeline and the window."""
from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from core.host import MediaHost
from core.window_config import DerivedWindow

LOG = logging.getLogger(__name__)

# Underlying seeks may land slightly before the window start.
SEEK_JITTER_S = 0.1


def window_span(window: DerivedWindow) -> float:
    """Upper bound of windowed time; unbounded until an open end is corrected."""
    if window.open_ended:
        return float("inf")
    return max(0.0, window.computed_duration)


def clamp_to_window(values: float | np.ndarray, window: DerivedWindow) -> float | np.ndarray:
    """Shift underlying times by the window start and clamp to ``[0, span]``."""
    upper = window_span(window)
    if isinstance(values, np.ndarray):
        return np.clip(values - window.offset_start, 0.0, upper)
    return float(min(upper, max(0.0, float(values) - window.offset_start)))


class PositionTransform:
    """
    Windowed view of the host position.

    Reads clamp to ``[0, computed_duration]`` and force the host back inside
    the window; writes are forwarded unclamped. An open-ended window that has
    not been corrected yet has no upper clamp.
    """

    def __init__(
        self,
        host: MediaHost,
        window: DerivedWindow,
        *,
        on_overshoot: Callable[[], None] | None = None,
    ):
        self._host = host
        self.window = window
        self._on_overshoot = on_overshoot

    def get(self) -> float:
        window = self.window
        raw = self._host.get_position() - window.offset_start
        if raw < -SEEK_JITTER_S:
            LOG.debug("Position %.3fs before window start; seeking to %.3fs", raw, window.offset_start)
            self._host.set_position(window.offset_start)
            return 0.0
        upper = window_span(window)
        if raw > upper:
            target = window.offset_start + upper
            LOG.debug("Position %.3fs past window end; seeking to %.3fs", raw, target)
            self._host.set_position(target)
            if self._on_overshoot is not None:
                self._on_overshoot()
            return upper
        return raw

    def set(self, seconds: float) -> None:
        self._host.set_position(seconds + self.window.offset_start)

    def to_underlying(self, seconds: float | np.ndarray) -> float | np.ndarray:
        if isinstance(seconds, np.ndarray):
            return seconds + self.window.offset_start
        return float(seconds) + self.window.offset_start
