"""Theme definitions for the windowed player UI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6 import QtWidgets

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeDefinition:
    """Palette configuration for the player.

    Parameters
    ----------
    name:
        Human-friendly display name for the theme.
    pg_background / pg_foreground:
        Colors applied to PyQtGraph backgrounds/foregrounds.
    stylesheet:
        Window stylesheet snippet tailored to this palette.
    buffered_color:
        Fill color for buffered ranges on the window track.
    playhead_color:
        Pen color for the playhead line.
    """

    name: str
    pg_background: str
    pg_foreground: str
    stylesheet: str
    buffered_color: str
    playhead_color: str


STYLESHEET_TEMPLATE = """
QMainWindow {{ background-color: {window_bg}; color: {text_primary}; }}
QLabel {{ font-size: 13px; color: {text_primary}; }}
QLabel#remainingLabel, QLabel#pageLabel {{ color: {text_muted}; }}
QFrame#transportBar {{
    background-color: {transport_bg};
    border-top: 1px solid {transport_border};
    padding: 6px 12px;
}}
QPushButton#playButton {{
    background-color: {button_bg};
    border: 1px solid {button_border};
    border-radius: 6px;
    padding: 6px 14px;
    color: {button_text};
    font-weight: 600;
}}
QPushButton#playButton:hover {{
    background-color: {button_bg_hover};
}}
QPushButton#playButton:pressed {{
    background-color: {button_bg_pressed};
}}
"""

# Application-wide, underneath the per-window theme stylesheet.
BASE_STYLESHEET = """
QGraphicsView#windowTrack { border: none; margin: 0px; padding: 0px; }
QLabel#elapsedLabel, QLabel#remainingLabel { font-family: monospace; }
"""

_BASE_STYLE_INSTALLED = False


def _make_stylesheet(palette: dict[str, str]) -> str:
    return STYLESHEET_TEMPLATE.format(**palette)


def install_base_style(app: QtWidgets.QApplication) -> bool:
    """Append the base stylesheet to ``app`` once per process."""
    global _BASE_STYLE_INSTALLED
    if _BASE_STYLE_INSTALLED:
        return False
    app.setStyleSheet((app.styleSheet() or "") + BASE_STYLESHEET)
    _BASE_STYLE_INSTALLED = True
    return True


def resolve_theme(name: str | None) -> ThemeDefinition:
    theme = THEMES.get(name or DEFAULT_THEME)
    if theme is None:
        LOG.warning("Unknown theme %r; using %s", name, DEFAULT_THEME)
        theme = THEMES[DEFAULT_THEME]
    return theme


DEFAULT_THEME = "Midnight"


THEMES: dict[str, ThemeDefinition] = {
    "Midnight": ThemeDefinition(
        name="Midnight",
        pg_background="#0b111c",
        pg_foreground="#e3e7f3",
        stylesheet=_make_stylesheet(
            {
                "window_bg": "#0b111c",
                "text_primary": "#e6ebf5",
                "text_muted": "#9ba9bf",
                "transport_bg": "#121a24",
                "transport_border": "#1f2a3d",
                "button_bg": "#1a2436",
                "button_border": "#27324a",
                "button_text": "#f3f6ff",
                "button_bg_hover": "#22304a",
                "button_bg_pressed": "#182235",
            }
        ),
        buffered_color="#3d6dff",
        playhead_color="#f4b860",
    ),
    "Dawn": ThemeDefinition(
        name="Dawn",
        pg_background="#F5F7FA",
        pg_foreground="#0F172A",
        stylesheet=_make_stylesheet(
            {
                "window_bg": "#F5F7FA",
                "text_primary": "#0F172A",
                "text_muted": "#5B6573",
                "transport_bg": "#FFFFFF",
                "transport_border": "#D6DCE5",
                "button_bg": "#E8EEF7",
                "button_border": "#C4CEDC",
                "button_text": "#0F172A",
                "button_bg_hover": "#DCE5F2",
                "button_bg_pressed": "#CCD8EA",
            }
        ),
        buffered_color="#60a5fa",
        playhead_color="#f0b429",
    ),
}
