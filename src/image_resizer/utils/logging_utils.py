"""Loguru sink configuration for the command line entry point."""

import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "IMAGE_RESIZER_LOG_LEVEL"
LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: str = "WARNING") -> str:
    """Replace loguru's default handler with a single stderr sink.

    The ``IMAGE_RESIZER_LOG_LEVEL`` environment variable, when set, takes
    precedence over ``level``. An unknown level name from the environment
    is ignored with a warning. Returns the level that was applied.
    """
    requested = os.getenv(LOG_LEVEL_ENV, level).upper()
    applied = requested
    try:
        _ = logger.level(requested)
    except ValueError:
        applied = level.upper()

    logger.remove()
    _ = logger.add(sys.stderr, level=applied, format=LOG_FORMAT)
    if applied != requested:
        logger.warning(f"Unknown log level {requested!r} in {LOG_LEVEL_ENV}, using {applied}")
    logger.debug(f"Logging configured at {applied}")
    return applied
