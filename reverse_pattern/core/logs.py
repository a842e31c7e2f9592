"""Logging setup for the generator package."""

from __future__ import annotations

import logging

from reverse_pattern.core.config import get_settings

PACKAGE_LOGGER = "reverse_pattern"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Args:
        level: Logging level name or number (defaults to Settings.log_level)

    Returns:
        The package logger
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(handler)
    return logger
