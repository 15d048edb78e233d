"""Adapt ``QMediaPlayer`` to the host capability set used by the core."""

from __future__ import annotations

import logging

from PySide6 import QtCore, QtMultimedia

from core.host import (
    BOUNDARY_ACKNOWLEDGED,
    HOST_EVENTS,
    METADATA_LOADED,
    PLAY_REQUEST,
    POSITION_UPDATE,
    ArrayTimeRanges,
    EventHub,
    Handler,
)

LOG = logging.getLogger(__name__)


class QtMediaHost(QtCore.QObject):
    """
    Host backed by a ``QMediaPlayer``.

    Qt reports milliseconds; the core works in seconds. Signals are mapped as
    ``durationChanged`` (non-zero) -> metadata-loaded, ``positionChanged`` ->
    position-update and a transition to PlayingState -> play-request.
    """

    def __init__(self, player: QtMultimedia.QMediaPlayer, parent: QtCore.QObject | None = None):
        super().__init__(parent)
        self.player = player
        self._events = EventHub(HOST_EVENTS)
        player.durationChanged.connect(self._on_duration_changed)
        player.positionChanged.connect(self._on_position_changed)
        player.playbackStateChanged.connect(self._on_playback_state_changed)
        player.errorOccurred.connect(self._on_error)

    # ----- capability set -----

    def get_position(self) -> float:
        return self.player.position() / 1000.0

    def set_position(self, seconds: float) -> None:
        self.player.setPosition(int(round(max(0.0, seconds) * 1000.0)))

    def get_duration(self) -> float:
        return self.player.duration() / 1000.0

    def get_buffered_ranges(self) -> ArrayTimeRanges:
        duration = self.get_duration()
        progress = float(self.player.bufferProgress())
        if duration <= 0 or progress <= 0:
            return ArrayTimeRanges()
        # QMediaPlayer only reports buffering ahead of the playhead as a fraction.
        start = self.get_position()
        end = min(duration, start + progress * (duration - start))
        return ArrayTimeRanges([(start, end)])

    def subscribe(self, event: str, handler: Handler) -> None:
        self._events.subscribe(event, handler)

    def unsubscribe(self, event: str, handler: Handler) -> None:
        self._events.unsubscribe(event, handler)

    def play(self) -> None:
        self.player.play()

    def pause(self) -> None:
        if self.player.playbackState() == QtMultimedia.QMediaPlayer.PlaybackState.PlayingState:
            self.player.pause()

    def acknowledge(self) -> None:
        """Tell listeners the boundary was handled."""
        self._events.emit(BOUNDARY_ACKNOWLEDGED)

    # ----- Qt slots -----

    def _on_duration_changed(self, duration_ms: int) -> None:
        if duration_ms <= 0:
            return
        LOG.debug("Media duration %.3fs", duration_ms / 1000.0)
        self._events.emit(METADATA_LOADED)

    def _on_position_changed(self, _position_ms: int) -> None:
        self._events.emit(POSITION_UPDATE)

    def _on_playback_state_changed(self, state) -> None:
        if state == QtMultimedia.QMediaPlayer.PlaybackState.PlayingState:
            self._events.emit(PLAY_REQUEST)

    def _on_error(self, error, message: str) -> None:
        LOG.warning("Media player error %s: %s", error, message)
