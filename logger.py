"""Level-filtered logger shared by the image service."""

from __future__ import annotations

import sys
from typing import TextIO


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def level_value(level: str) -> int:
    """Map a level name to its numeric threshold, defaulting to INFO."""
    name = level.upper()
    if name == "WARNING":
        name = "WARN"
    return _LEVELS.get(name, _LEVELS["INFO"])


class Logger:
    """Minimal logger with level filtering and a swappable stream."""

    def __init__(self, level: str = "INFO", stream: TextIO | None = None) -> None:
        self._level = level_value(level)
        self._stream = stream

    def set_stream(self, stream: TextIO | None) -> None:
        self._stream = stream

    def set_level(self, level: str) -> None:
        self._level = level_value(level)

    def _write(self, message: str, error: bool = False) -> None:
        stream = self._stream or (sys.stderr if error else sys.stdout)
        print(message, file=stream)

    def debug(self, message: str) -> None:
        if self._level <= _LEVELS["DEBUG"]:
            self._write(message)

    def info(self, message: str) -> None:
        if self._level <= _LEVELS["INFO"]:
            self._write(message)

    def warn(self, message: str) -> None:
        if self._level <= _LEVELS["WARN"]:
            self._write(message, error=True)

    def error(self, message: str) -> None:
        if self._level <= _LEVELS["ERROR"]:
            self._write(message, error=True)


_LOGGER = Logger()


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _LOGGER
