"""Logging configuration for chaincode_builder.

Every module obtains its logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once to attach a rich handler to the package logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "chaincode_builder"
LOG_FORMAT = "%(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Attach a single rich handler to the package logger.

    Args:
        level: Level name or number for the package logger.
        console: Console to log to (defaults to stderr).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_chaincode_builder", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        log_time_format=DATE_FORMAT,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._chaincode_builder = True
    logger.addHandler(handler)
