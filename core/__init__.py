"""Core package exports for the windowed player."""

# Re-export commonly used modules for convenience.
from . import boundary, buffered, duration, host, position, time_offset, window_config

__all__ = [
    "boundary",
    "buffered",
    "duration",
    "host",
    "position",
    "time_offset",
    "window_config",
]
