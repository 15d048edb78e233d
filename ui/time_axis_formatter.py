"""Shared clock formatter for windowed time labels."""

from __future__ import annotations

from math import isfinite
from typing import Iterable, Protocol


class _SupportsToMediaTime(Protocol):
    def to_media_time(self, seconds: float) -> float:
        ...


def _clock(seconds: float) -> str:
    total = int(round(seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class TimeTickFormatter:
    """Format windowed seconds as clock labels, optionally on the media timeline."""

    __slots__ = ("_source", "_mode")

    def __init__(self, *, source: _SupportsToMediaTime | None = None, mode: str = "window") -> None:
        self._source = source
        self._mode = "media" if str(mode).lower() == "media" else "window"

    @property
    def mode(self) -> str:
        return self._mode

    def set_mode(self, mode: str) -> None:
        self._mode = "media" if str(mode).lower() == "media" else "window"

    def format_ticks(self, values: Iterable[float]) -> list[str]:
        return [self._format_single(v) for v in values]

    def format_remaining(self, value: float) -> str:
        numeric = self._numeric(value)
        if numeric is None:
            return ""
        return "-" + _clock(max(0.0, numeric))

    def _format_single(self, value: float) -> str:
        numeric = self._numeric(value)
        if numeric is None:
            return ""
        if self._mode == "media" and self._source is not None:
            numeric = self._source.to_media_time(numeric)
        return _clock(max(0.0, numeric))

    @staticmethod
    def _numeric(value) -> float | None:
        if value is None:
            return None
        try:
            numeric = float(value)
        except (TypeError, ValueError):
            return None
        if not isfinite(numeric):
            return None
        return numeric
