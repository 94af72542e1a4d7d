"""Logging setup for Grocery Optimizer."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

PACKAGE_LOGGER = "grocery_optimizer"


def coerce_level(value: str | int | None, default: int = logging.WARNING) -> int:
    """Turn a level name or number into a logging level."""
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return _LEVELS.get(value.upper().strip(), default)
    return default


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Send package logs to stderr through Rich.

    ``LOG_LEVEL`` in the environment wins over ``level``. Calling this
    again only adjusts the level.

    Args:
        level: Level name or number; WARNING when not given

    Returns:
        The package logger
    """
    resolved = coerce_level(os.environ.get("LOG_LEVEL") or level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(resolved)

    return logger
