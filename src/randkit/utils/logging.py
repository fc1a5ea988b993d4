"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain package loggers.
    - Allow an optional verbose/debug mode for the CLI.

Notes/Edge cases:
    - Configuration is idempotent; calling :func:`configure_logging` again
      adjusts the level and re-targets the current ``sys.stderr`` without
      stacking handlers.
    - Library code logs at DEBUG only and never logs secure random material.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "randkit"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class _CLIHandler(logging.StreamHandler):
    """Marker subclass so :func:`configure_logging` can find its own handler."""


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Route package logs at ``level`` and above to ``sys.stderr``."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    handler = next((h for h in logger.handlers if isinstance(h, _CLIHandler)), None)
    if handler is None:
        handler = _CLIHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    else:
        # setStream would flush the previous stream, which may already be closed.
        handler.acquire()
        try:
            handler.stream = sys.stderr
        finally:
            handler.release()
    return logger
