"""Project logger configuration for lambdava.

Importing the library only attaches a ``NullHandler``; records reach the
embedding application's own logging setup.  The CLI calls
:func:`setup_logger` to get a stderr handler.
"""

import logging
import os
import sys

__all__ = ["logger", "resolve_level", "setup_logger"]

LOG_LEVEL_ENV = "LAMBDAVA_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING


def resolve_level(level: str | None) -> int:
    """Map a level name to its number, falling back to WARNING when unknown."""
    if not level:
        return DEFAULT_LEVEL
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def setup_logger(
    name: str = "lambdava",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project or module name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown
            names fall back to WARNING
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV)
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


logger = logging.getLogger("lambdava")
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
if os.getenv(LOG_LEVEL_ENV):
    logger.setLevel(resolve_level(os.getenv(LOG_LEVEL_ENV)))
