from __future__ import annotations

from core.host import MediaHost
from core.position import PositionTransform


class DurationView:
    """Windowed duration and remaining time over a host timeline."""

    def __init__(self, host: MediaHost, position: PositionTransform):
        self._host = host
        self._position = position

    def duration(self) -> float:
        window = self._position.window
        if window.offset_end > 0:
            # Hosts may refresh internal state when queried.
            self._host.get_duration()
            return window.computed_duration
        return self._host.get_duration() - window.offset_start

    def original_duration(self) -> float:
        return self._host.get_duration()

    def remaining_time(self) -> float:
        return self.duration() - self._position.get()
