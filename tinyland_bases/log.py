"""Logging setup for the command-line tool.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, on the package logger, when the CLI starts.
"""

import logging
import sys
from typing import Union

PACKAGE_LOGGER = "tinyland_bases"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Stdout is reserved for codec output. Calling this again only updates
    the level.

    Raises:
        ValueError: If ``level`` is not a known logging level name.
    """
    if isinstance(level, str):
        name = level.strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
