"""Resolve window configuration (explicit bounds or pages) into offsets."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Mapping

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowConfig:
    start: float = 0.0
    end: float = 0.0
    page: int = 1
    per_page_minutes: float = 0.0

    _ALIASES = {"perPageInMinutes": "per_page_minutes"}

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "WindowConfig":
        """Merge a partial option mapping over the defaults."""
        cfg = cls()
        if not options:
            return cfg
        values: dict[str, Any] = {}
        for key, value in options.items():
            if value is None:
                continue
            name = cls._ALIASES.get(key, key)
            if name not in ("start", "end", "page", "per_page_minutes"):
                LOG.debug("Ignoring unknown window option %r", key)
                continue
            values[name] = int(value) if name == "page" else float(value)
        return replace(cfg, **values)

    @property
    def per_page_seconds(self) -> float:
        return self.per_page_minutes * 60.0

    @property
    def page_index(self) -> int:
        return self.page - 1


@dataclass(frozen=True)
class DerivedWindow:
    offset_start: float
    offset_end: float
    computed_duration: float

    @property
    def open_ended(self) -> bool:
        return self.offset_end <= 0

    def corrected(self, total_duration: float) -> "DerivedWindow":
        """Fit the window inside a media of ``total_duration`` seconds.

        An open-ended window (``offset_end == 0``) extends to the end of the
        media. A start beyond the media resets the window to the whole media.
        """
        total = max(0.0, float(total_duration))
        start = self.offset_start
        end = self.offset_end
        duration = self.computed_duration
        if self.open_ended:
            end = total
            duration = total - start
        if end > total:
            end = total
            duration = total - start
        if start > total:
            start = 0.0
            end = total
            duration = total
        return DerivedWindow(start, end, max(0.0, duration))


def resolve_window(config: WindowConfig) -> DerivedWindow:
    per_page = config.per_page_seconds
    page_index = config.page_index
    offset_start = config.start if config.start > 0 else page_index * per_page
    offset_end = config.end if config.end > 0 else (page_index + 1) * per_page
    if 0 < offset_end < offset_start:
        LOG.warning(
            "Window end %.3fs precedes start %.3fs; using an empty window",
            offset_end,
            offset_start,
        )
        offset_end = offset_start
    return DerivedWindow(
        offset_start=float(offset_start),
        offset_end=float(offset_end),
        computed_duration=float(offset_end - offset_start) if offset_end > 0 else 0.0,
    )


def page_count(total_duration: float, per_page_seconds: float) -> int | None:
    if per_page_seconds <= 0:
        return None
    return int(math.ceil(max(0.0, total_duration) / per_page_seconds))
