"""Logger setup shared by the solver and the command-line driver."""

from __future__ import annotations

import logging

from .config import LOG_FORMAT, LOG_LEVEL, LOGGER_NAME


def resolve_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or one of its children.

    The root ``sudokucp`` logger gets a console handler the first time it is
    requested; children propagate to it.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(resolve_level(LOG_LEVEL))

    if name is None:
        return root
    return root.getChild(name)


def set_level(level: int | str) -> None:
    get_logger().setLevel(level)
