"""Logging utilities for the word search game."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure root logging with the game's formatter.

    Player-facing text goes to stdout through ``print``; logging is kept for
    diagnostics, so the default level stays quiet during play.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Translate ``"debug"``/``"INFO"``-style names into logging levels."""

    value = getattr(logging, (name or "").upper(), None)
    return value if isinstance(value, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
