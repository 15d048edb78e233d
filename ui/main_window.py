# ui/main_window.py
from __future__ import annotations

import logging

from PySide6 import QtWidgets

from config import PlayerConfig
from core.host import METADATA_LOADED, POSITION_UPDATE, WINDOW_ENDED
from core.time_offset import TimeOffsetPlayer
from ui.qt_host import QtMediaHost
from ui.themes import ThemeDefinition, resolve_theme
from ui.time_axis_formatter import TimeTickFormatter
from ui.window_track import WindowTrack

LOG = logging.getLogger(__name__)


def page_label_text(page: int, page_count: int | None) -> str:
    if page_count is None:
        return ""
    return f"Page {page} / {max(page_count, 1)}"


class PlayerWindow(QtWidgets.QMainWindow):
    """Video surface over a transport bar that only knows the window."""

    def __init__(
        self,
        windowed: TimeOffsetPlayer,
        host: QtMediaHost,
        *,
        config: PlayerConfig | None = None,
        video_widget: QtWidgets.QWidget | None = None,
    ):
        super().__init__()
        self.windowed = windowed
        self.host = host
        self._config = config or PlayerConfig()
        self._formatter = TimeTickFormatter(source=windowed, mode=self._config.time_mode)
        self._theme: ThemeDefinition | None = None

        central = QtWidgets.QWidget(self)
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        if video_widget is not None:
            layout.addWidget(video_widget, stretch=1)

        transport = QtWidgets.QFrame(central)
        transport.setObjectName("transportBar")
        bar = QtWidgets.QHBoxLayout(transport)

        self.playButton = QtWidgets.QPushButton("Play", transport)
        self.playButton.setObjectName("playButton")
        self.playButton.clicked.connect(self._toggle_playback)
        self.elapsedLabel = QtWidgets.QLabel("00:00:00", transport)
        self.elapsedLabel.setObjectName("elapsedLabel")
        self.track = WindowTrack(source=windowed, mode=self._config.time_mode, parent=transport)
        self.track.seekRequested.connect(self._on_seek_requested)
        self.remainingLabel = QtWidgets.QLabel("-00:00:00", transport)
        self.remainingLabel.setObjectName("remainingLabel")
        self.pageLabel = QtWidgets.QLabel("", transport)
        self.pageLabel.setObjectName("pageLabel")

        bar.addWidget(self.playButton)
        bar.addWidget(self.elapsedLabel)
        bar.addWidget(self.track, stretch=1)
        bar.addWidget(self.remainingLabel)
        bar.addWidget(self.pageLabel)
        layout.addWidget(transport)
        self.setCentralWidget(central)

        self.continueButton = QtWidgets.QPushButton("Continue", self)
        self.continueButton.clicked.connect(self._on_continue)
        self.statusBar().addPermanentWidget(self.continueButton)
        self.continueButton.setVisible(False)

        # Subscribed after the windowed player, so the window is already corrected.
        host.subscribe(METADATA_LOADED, self._on_metadata_loaded)
        host.subscribe(POSITION_UPDATE, self._on_position_update)
        windowed.subscribe(WINDOW_ENDED, self._on_window_ended)
        host.player.playbackStateChanged.connect(self._on_playback_state_changed)

        self.apply_theme(self._config.theme)
        if host.get_duration() > 0:
            self._on_metadata_loaded()

    def apply_theme(self, name: str) -> None:
        theme = resolve_theme(name)
        self._theme = theme
        self._config.theme = theme.name
        self.setStyleSheet(theme.stylesheet)
        self.track.apply_theme(theme)

    def refresh(self) -> None:
        windowed = self.windowed
        elapsed = windowed.get_position()
        self.track.set_duration(windowed.get_duration())
        self.track.set_position(elapsed)
        self.track.set_buffered(windowed.get_buffered_ranges().as_array())
        self.elapsedLabel.setText(self._formatter.format_ticks([elapsed])[0])
        self.remainingLabel.setText(self._formatter.format_remaining(windowed.remaining_time()))

    # ----- handlers -----

    def _on_metadata_loaded(self, *_args) -> None:
        self.continueButton.setVisible(False)
        self.statusBar().clearMessage()
        self.pageLabel.setText(page_label_text(self.windowed.config.page, self.windowed.page_count))
        self.refresh()

    def _on_position_update(self, *_args) -> None:
        self.refresh()

    def _on_window_ended(self) -> None:
        text = page_label_text(self.windowed.config.page, self.windowed.page_count)
        self.statusBar().showMessage(f"{text} finished" if text else "Segment finished")
        self.continueButton.setVisible(True)

    def _on_continue(self) -> None:
        self.continueButton.setVisible(False)
        self.statusBar().clearMessage()
        self.host.acknowledge()

    def _on_seek_requested(self, seconds: float) -> None:
        self.windowed.set_position(seconds)
        self.refresh()

    def _toggle_playback(self) -> None:
        if self.host.player.isPlaying():
            self.windowed.pause()
        else:
            self.windowed.play()

    def _on_playback_state_changed(self, _state) -> None:
        self.playButton.setText("Pause" if self.host.player.isPlaying() else "Play")

    def closeEvent(self, event):
        self.host.unsubscribe(METADATA_LOADED, self._on_metadata_loaded)
        self.host.unsubscribe(POSITION_UPDATE, self._on_position_update)
        self.windowed.detach()
        self._config.save()
        super().closeEvent(event)
