"""Logging configuration for the ``svg_bounds`` namespace."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "SVG_BOUNDS_LOG_LEVEL"
"""Environment variable with the default log level name."""


def _level_from_env() -> int:
    """Read the default level from the environment."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level in {LOG_LEVEL_ENV}: {name!r}")
    return level


def setup_logging(level: int | None = None, log_file: str | None = None) -> None:
    """Configure the logger of the ``svg_bounds`` package.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to the value of
            ``SVG_BOUNDS_LOG_LEVEL`` or INFO.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = _level_from_env()

    logger = logging.getLogger("svg_bounds")
    logger.setLevel(level)

    # avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized")
