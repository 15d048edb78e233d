"""End-of-window detection.

The controller has two states. ``ACTIVE`` while playback is inside the
window; ``ENDED`` once remaining time reaches zero, at which point the host is
paused and ``window-ended`` is emitted. Emission is single-shot: the fired
flag is cleared only when the window is re-established (metadata-loaded) or
when a listener acknowledges the boundary.
"""
from __future__ import annotations

import enum
import logging
from typing import Callable

from core.duration import DurationView
from core.host import MediaHost
from core.position import PositionTransform

LOG = logging.getLogger(__name__)


class BoundaryState(enum.Enum):
    ACTIVE = "active"
    ENDED = "ended"


class BoundaryEventController:
    def __init__(
        self,
        host: MediaHost,
        position: PositionTransform,
        durations: DurationView,
        emit: Callable[[], None],
    ):
        self._host = host
        self._position = position
        self._durations = durations
        self._emit = emit
        self._state = BoundaryState.ACTIVE
        self._fired = False

    @property
    def state(self) -> BoundaryState:
        return self._state

    @property
    def fired(self) -> bool:
        return self._fired

    def reset(self) -> None:
        """Re-enter ACTIVE with a fresh single-shot emission."""
        self._state = BoundaryState.ACTIVE
        self._fired = False

    def acknowledge(self) -> None:
        if self._fired:
            LOG.debug("Boundary acknowledged; re-arming window-ended")
        self._fired = False

    def window_reached(self) -> None:
        self._state = BoundaryState.ENDED
        self._host.pause()
        if self._fired:
            return
        # Set before emitting so a listener reading the position cannot re-enter.
        self._fired = True
        LOG.info("Window end reached at %.3fs", self._position.window.computed_duration)
        self._emit()

    def on_tick(self) -> None:
        # An open end is unknown until metadata corrects it.
        if self._position.window.open_ended:
            return
        if self._durations.remaining_time() <= 0:
            self.window_reached()
        elif self._state is BoundaryState.ENDED:
            self._state = BoundaryState.ACTIVE

    def on_play_request(self) -> None:
        if self._position.window.open_ended or self._durations.remaining_time() > 0:
            return
        LOG.debug("Play requested at window end; restarting window")
        self._position.set(0.0)
        self._state = BoundaryState.ACTIVE
        self._host.play()
