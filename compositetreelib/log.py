"""Logging setup for CompositeTreeLib.

Library modules only ever call ``logging.getLogger(__name__)``. Applications
that want to see that output call :func:`configure_logging` once.
"""

import logging
import sys
from typing import Optional, TextIO

from .config import LoggingConfig

PACKAGE_LOGGER = "compositetreelib"

# Marks the handler we install so re-configuration replaces only our own
_HANDLER_TAG = "_compositetreelib_handler"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it.

    Args:
        name: Dotted suffix below the package logger (None = package logger)

    Returns:
        logging.Logger instance
    """
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(cfg: Optional[LoggingConfig] = None,
                      stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        cfg: Logging configuration (defaults to LoggingConfig.from_env())
        stream: Output stream (defaults to sys.stderr)

    Returns:
        The configured package logger

    Raises:
        ConfigError: If cfg.level is not a known level name
    """
    cfg = cfg or LoggingConfig.from_env()
    cfg.validate_or_raise()

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(cfg.fmt))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
    logger.setLevel(cfg.level.upper())
    return logger
