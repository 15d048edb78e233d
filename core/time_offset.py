"""Windowed player wrapper.

``TimeOffsetPlayer`` composes over a host player and answers the same
position/duration/buffered queries in window coordinates, so a long
recording can be paged into fixed-length segments::

    player = TimeOffsetPlayer(host, WindowConfig(page=3, per_page_minutes=2))
    player.subscribe(WINDOW_ENDED, on_page_finished)
    player.get_position()  # seconds since 240.0 on the host timeline
"""
from __future__ import annotations

import logging

from core.boundary import BoundaryEventController, BoundaryState
from core.buffered import BufferedRangeView
from core.duration import DurationView
from core.host import (
    BOUNDARY_ACKNOWLEDGED,
    METADATA_LOADED,
    PLAY_REQUEST,
    POSITION_UPDATE,
    WINDOW_ENDED,
    EventHub,
    Handler,
    MediaHost,
)
from core.position import PositionTransform
from core.window_config import DerivedWindow, WindowConfig, page_count, resolve_window

LOG = logging.getLogger(__name__)


class TimeOffsetPlayer:
    def __init__(self, host: MediaHost, config: WindowConfig | None = None):
        self.host = host
        self.config = config or WindowConfig()
        self._resolved = resolve_window(self.config)
        self.page_count: int | None = None

        self._events = EventHub((WINDOW_ENDED,))
        self._position = PositionTransform(host, self._resolved, on_overshoot=self._on_overshoot)
        self._durations = DurationView(host, self._position)
        self._boundary = BoundaryEventController(
            host,
            self._position,
            self._durations,
            emit=lambda: self._events.emit(WINDOW_ENDED),
        )

        self._host_handlers: tuple[tuple[str, Handler], ...] = (
            (METADATA_LOADED, self._on_metadata_loaded),
            (POSITION_UPDATE, self._on_position_update),
            (PLAY_REQUEST, self._on_play_request),
            (BOUNDARY_ACKNOWLEDGED, self._on_boundary_acknowledged),
        )
        for event, handler in self._host_handlers:
            host.subscribe(event, handler)
        LOG.debug(
            "Window resolved to [%.3f, %.3f] (%.3fs)",
            self._resolved.offset_start,
            self._resolved.offset_end,
            self._resolved.computed_duration,
        )
        # Hosts attached after their media loaded will not signal metadata again.
        if self.host.get_duration() > 0:
            self._on_metadata_loaded()

    # ----- windowed capability set -----

    def get_position(self) -> float:
        return self._position.get()

    def set_position(self, seconds: float) -> None:
        self._position.set(seconds)

    def get_duration(self) -> float:
        return self._durations.duration()

    def get_buffered_ranges(self) -> BufferedRangeView:
        return BufferedRangeView(self.host.get_buffered_ranges(), self._position.window)

    def remaining_time(self) -> float:
        return self._durations.remaining_time()

    def original_duration(self) -> float:
        return self._durations.original_duration()

    def play(self) -> None:
        self.host.play()

    def pause(self) -> None:
        self.host.pause()

    # ----- window state -----

    @property
    def window(self) -> DerivedWindow:
        return self._position.window

    @property
    def state(self) -> BoundaryState:
        return self._boundary.state

    @property
    def boundary_fired(self) -> bool:
        return self._boundary.fired

    def to_media_time(self, seconds: float) -> float:
        return self._position.to_underlying(seconds)

    def subscribe(self, event: str, handler: Handler) -> None:
        self._events.subscribe(event, handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        self._events.unsubscribe(event, handler)

    def acknowledge_boundary(self) -> None:
        self._boundary.acknowledge()

    def detach(self) -> None:
        """Stop listening to the host; queries keep working."""
        for event, handler in self._host_handlers:
            self.host.unsubscribe(event, handler)

    # ----- host signal handlers -----

    def _on_metadata_loaded(self, *_args) -> None:
        total = self.original_duration()
        corrected = self._resolved.corrected(total)
        if corrected != self._resolved:
            LOG.info(
                "Window corrected for %.3fs media: [%.3f, %.3f] (%.3fs)",
                total,
                corrected.offset_start,
                corrected.offset_end,
                corrected.computed_duration,
            )
        self._position.window = corrected
        self.page_count = page_count(total, self.config.per_page_seconds)
        if self.page_count is not None:
            LOG.info("Page %d of %d", self.config.page, self.page_count)
        self._boundary.reset()
        if self.host.get_position() - corrected.offset_start < 0:
            self._position.set(0.0)

    def _on_position_update(self, *_args) -> None:
        self._boundary.on_tick()

    def _on_play_request(self, *_args) -> None:
        self._boundary.on_play_request()

    def _on_boundary_acknowledged(self, *_args) -> None:
        self._boundary.acknowledge()

    def _on_overshoot(self) -> None:
        self._boundary.window_reached()
