"""Coloured console logging with a level and a source tag."""

from __future__ import annotations

import enum


class LogLevel(enum.Enum):
    """Severity of a log message."""

    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    DEBUG = "Debug"
    EVENT = "Event"


LEVEL_COLOR = {
    LogLevel.INFO: "\033[32m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.EVENT: "\033[35m",
}

RESET_COLOR = "\033[0m"


def level_to_string(level: LogLevel) -> str:
    """Readable name of a level, or "Unknown" for anything else."""
    if isinstance(level, LogLevel):
        return level.value
    return "Unknown"


def format_message(level: LogLevel, message: str, source: str) -> str:
    """Build the coloured line ``[source] [Level] message``.

    Raises KeyError for a level that has no colour.
    """
    color = LEVEL_COLOR[level]
    return f"{color}[{source}] [{level_to_string(level)}] {message}{RESET_COLOR}"


def log(level: LogLevel, message: str, source: str = "") -> None:
    """Print a formatted message to standard output."""
    print(format_message(level, message, source))