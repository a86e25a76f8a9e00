"""Logging utilities for the puzzle engine.

Engine modules only ever ask for a logger; nothing under ``pairlink``
installs handlers on import. Applications (and ``main.py``) opt in through
``configure_logging``.
"""

from __future__ import annotations

import logging
from typing import Optional


PACKAGE_LOGGER = "pairlink"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    """Route log records to stderr with a compact one-line formatter."""

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or PACKAGE_LOGGER)
