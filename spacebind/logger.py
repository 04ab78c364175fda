"""
Logging

Indentation-aware wrapper around the standard logging module.
"""

from __future__ import annotations
import logging
from typing import Optional, TextIO

LOGGER_NAME = "spacebind"


class IndentLogger:
    """Logger that prefixes messages with a configurable indentation.

    Nesting depth is passed per call, so the same logger can be shared by
    the placement engine and the window manager.
    """

    def __init__(
        self,
        enabled: bool = True,
        indent: int = 4,
        name: str = LOGGER_NAME,
    ):
        self._logger = logging.getLogger(name)
        self._enabled = enabled
        self.set_indent(indent)

    def set_indent(self, indent: int):
        self._indent = indent
        self._indent_string = " " * indent

    @property
    def indent(self) -> int:
        return self._indent

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        self._enabled = value

    def log(self, message: str, *args, level: int = logging.INFO):
        """Log a message without indentation."""
        if self._enabled:
            self._logger.log(level, message, *args)

    def log_indent(self, depth: int, message: str, *args, level: int = logging.INFO):
        """Log a message indented by ``depth`` levels."""
        if self._enabled:
            self._logger.log(level, self._indent_string * depth + message, *args)

    def warning(self, message: str, *args, depth: int = 0):
        self.log_indent(depth, message, *args, level=logging.WARNING)

    def error(self, message: str, *args, depth: int = 0):
        self.log_indent(depth, message, *args, level=logging.ERROR)


def configure_logging(
    level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Handler:
    """Attach a stream handler to the package logger.

    Args:
        level: Minimum level for the package logger
        stream: Output stream (defaults to stderr)

    Returns:
        The installed handler
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S"
        )
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
