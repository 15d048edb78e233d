"""Progress track for the window: buffered ranges and playhead."""

from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6 import QtCore

from ui.themes import ThemeDefinition
from ui.time_axis_formatter import TimeTickFormatter


def bar_geometry(ranges: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(x0, width)`` for non-empty ``(start, end)`` rows."""
    arr = np.asarray(ranges, dtype=float).reshape(-1, 2)
    widths = arr[:, 1] - arr[:, 0]
    keep = widths > 0
    return arr[keep, 0], widths[keep]


class WindowTimeAxis(pg.AxisItem):
    """Bottom axis of the track; ticks are clock labels in window or media time."""

    def __init__(self, *, source=None, mode: str = "window", **kwargs):
        super().__init__(orientation="bottom", **kwargs)
        self.formatter = TimeTickFormatter(source=source, mode=mode)

    def set_mode(self, mode: str) -> None:
        self.formatter.set_mode(mode)
        view = self.linkedView()
        if view is not None:
            self.linkedViewChanged(view, None)
        else:
            self.update()

    def tickStrings(self, values, scale, spacing):
        return self.formatter.format_ticks(values)


class WindowTrack(pg.PlotWidget):
    """Track spanning ``[0, duration]``; clicks request a windowed seek."""

    seekRequested = QtCore.Signal(float)

    def __init__(self, *, source=None, mode: str = "window", parent=None):
        axis = WindowTimeAxis(source=source, mode=mode)
        super().__init__(parent=parent, axisItems={"bottom": axis})
        self.time_axis = axis
        self.setObjectName("windowTrack")
        self.setMinimumHeight(56)
        self.setMaximumHeight(72)

        plot = self.getPlotItem()
        plot.setMenuEnabled(False)
        plot.setMouseEnabled(x=False, y=False)
        plot.hideButtons()
        plot.showAxis("left", show=False)
        vb = plot.getViewBox()
        vb.enableAutoRange(x=False, y=False)
        vb.setYRange(0.0, 1.0, padding=0)

        self._duration = 0.0
        self._buffered = pg.BarGraphItem(x0=[0.0], width=[0.0], y0=0.35, height=0.3)
        self._buffered.setZValue(5)
        self._buffered.setVisible(False)
        plot.addItem(self._buffered)

        self._playhead = pg.InfiniteLine(pos=0.0, angle=90, movable=False)
        self._playhead.setZValue(20)
        plot.addItem(self._playhead)

        self.scene().sigMouseClicked.connect(self._on_scene_clicked)

    @property
    def duration(self) -> float:
        return self._duration

    def set_duration(self, duration: float) -> None:
        self._duration = max(0.0, float(duration))
        # Buffered bars and playhead are already clamped to this range.
        upper = self._duration if self._duration > 0 else 1.0
        vb = self.getPlotItem().getViewBox()
        vb.setLimits(xMin=0.0, xMax=upper)
        vb.setXRange(0.0, upper, padding=0)

    def set_buffered(self, ranges: np.ndarray) -> None:
        x0, width = bar_geometry(ranges)
        if x0.size == 0:
            self._buffered.setVisible(False)
            return
        self._buffered.setOpts(x0=x0, width=width, y0=0.35, height=0.3)
        self._buffered.setVisible(True)

    def set_position(self, seconds: float) -> None:
        self._playhead.setValue(min(self._duration, max(0.0, float(seconds))))

    def set_time_mode(self, mode: str) -> None:
        self.time_axis.set_mode(mode)

    def apply_theme(self, theme: ThemeDefinition) -> None:
        self.setBackground(theme.pg_background)
        self.time_axis.setPen(pg.mkPen(theme.pg_foreground))
        self.time_axis.setTextPen(pg.mkPen(theme.pg_foreground))
        self._buffered.setOpts(brush=pg.mkBrush(theme.buffered_color), pen=pg.mkPen(None))
        self._playhead.setPen(pg.mkPen(theme.playhead_color, width=2.0))

    def _on_scene_clicked(self, event) -> None:
        if self._duration <= 0:
            return
        vb = self.getPlotItem().getViewBox()
        point = vb.mapSceneToView(event.scenePos())
        seconds = min(self._duration, max(0.0, float(point.x())))
        self.seekRequested.emit(seconds)
