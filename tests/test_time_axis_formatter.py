import numpy as np

from ui.time_axis_formatter import TimeTickFormatter


class _Offset:
    def __init__(self, offset: float):
        self.offset = offset

    def to_media_time(self, seconds: float) -> float:
        return seconds + self.offset


def test_window_mode_formats_windowed_seconds():
    formatter = TimeTickFormatter(source=_Offset(240.0))
    assert formatter.format_ticks([0.0, 59.6, 3661.01]) == ["00:00:00", "00:01:00", "01:01:01"]


def test_media_mode_adds_window_offset():
    formatter = TimeTickFormatter(source=_Offset(240.0), mode="MEDIA")
    assert formatter.mode == "media"
    assert formatter.format_ticks([0.0, 30.0]) == ["00:04:00", "00:04:30"]
    formatter.set_mode("window")
    assert formatter.format_ticks([30.0]) == ["00:00:30"]


def test_media_mode_without_source_falls_back_to_window():
    formatter = TimeTickFormatter(mode="media")
    assert formatter.format_ticks([90.0]) == ["00:01:30"]


def test_remaining_label():
    formatter = TimeTickFormatter()
    assert formatter.format_remaining(45.2) == "-00:00:45"
    assert formatter.format_remaining(-3.0) == "-00:00:00"


def test_tick_formatter_handles_nan_values():
    formatter = TimeTickFormatter()
    labels = formatter.format_ticks([np.nan, np.inf, -np.inf, None, "abc"])
    assert labels == ["", "", "", "", ""]
    assert formatter.format_remaining(np.nan) == ""
