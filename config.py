from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from core.window_config import WindowConfig

LOG = logging.getLogger(__name__)

TIME_MODES = ("window", "media")


@dataclass
class PlayerConfig:
    window_start: float = 0.0
    window_end: float = 0.0
    page: int = 1
    per_page_minutes: float = 0.0
    theme: str = "Midnight"
    volume: float = 0.8
    time_mode: str = "window"
    ini_path: Path | None = None

    @classmethod
    def load(cls, ini_path: str | Path | None = None) -> "PlayerConfig":
        cfg = cls()
        path = Path(ini_path or "config.ini")
        if path.exists():
            import configparser

            parser = configparser.ConfigParser()
            parser.read(path)
            section = parser["window"] if "window" in parser else None
            if section:
                cfg.window_start = section.getfloat("start", fallback=cfg.window_start)
                cfg.window_end = section.getfloat("end", fallback=cfg.window_end)
                cfg.page = section.getint("page", fallback=cfg.page)
                cfg.per_page_minutes = section.getfloat(
                    "per_page_minutes", fallback=cfg.per_page_minutes
                )

            ui_section = parser["ui"] if "ui" in parser else None
            if ui_section:
                cfg.theme = ui_section.get("theme", fallback=cfg.theme)
                volume = ui_section.getfloat("volume", fallback=cfg.volume)
                cfg.volume = max(0.0, min(1.0, volume))
                mode = ui_section.get("time_mode", fallback=cfg.time_mode).strip().lower()
                if mode in TIME_MODES:
                    cfg.time_mode = mode
                else:
                    LOG.warning("Unknown time_mode %r in %s; using %r", mode, path, cfg.time_mode)
        cfg.ini_path = path
        return cfg

    def window_config(self, overrides: Mapping[str, Any] | None = None) -> WindowConfig:
        """Window options from the ini file, with non-None ``overrides`` on top."""
        options: dict[str, Any] = {
            "start": self.window_start,
            "end": self.window_end,
            "page": self.page,
            "per_page_minutes": self.per_page_minutes,
        }
        for key, value in (overrides or {}).items():
            if value is not None:
                options[key] = value
        return WindowConfig.from_options(options)

    def save(self) -> None:
        """Write the ``[ui]`` section; window bounds are per-session only."""
        if self.ini_path is None:
            return
        import configparser

        parser = configparser.ConfigParser()
        if self.ini_path.exists():
            parser.read(self.ini_path)
        parser["ui"] = {
            "theme": self.theme,
            "volume": f"{self.volume:.3f}",
            "time_mode": self.time_mode,
        }
        with self.ini_path.open("w") as fh:
            parser.write(fh)
