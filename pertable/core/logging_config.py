"""
Logging configuration for pertable.

Log records go to stderr so that lookup output on stdout stays clean. When
the display config allows styling and stderr is a terminal, level names are
colored with the same ANSI codes the renderer uses.
"""

import logging
import sys
from typing import Optional

from pertable.core.constants import FG_COLORS, FG_RESET

DEFAULT_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"

LEVEL_COLORS = {
    "DEBUG": FG_COLORS["blue"],
    "INFO": FG_COLORS["green"],
    "WARNING": FG_COLORS["yellow"],
    "ERROR": FG_COLORS["red"],
    "CRITICAL": FG_COLORS["magenta"],
}


class LevelColorFormatter(logging.Formatter):
    """Formatter that wraps the level name in its ANSI color."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{FG_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
    use_color: bool = False,
) -> None:
    """
    Configure logging for pertable.

    Parameters
    ----------
    level : str
        Logging level: 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'
    format_string : str, optional
        Custom format string. If None, uses default format.
    stream : file-like object, optional
        Stream to write logs to. If None, uses sys.stderr.
    use_color : bool
        Color level names with ANSI escape codes
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    if stream is None:
        stream = sys.stderr

    formatter_class = LevelColorFormatter if use_color else logging.Formatter
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter_class(format_string, datefmt="%Y-%m-%d %H:%M:%S"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[handler],
        force=True,
    )


def stream_supports_color(stream: Optional[object] = None) -> bool:
    """True if the stream (stderr by default) is an interactive terminal."""
    if stream is None:
        stream = sys.stderr
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Parameters
    ----------
    name : str
        Logger name relative to the package (e.g. 'elements.loader')

    Returns
    -------
    logging.Logger
        Logger instance
    """
    return logging.getLogger(f"pertable.{name}")
