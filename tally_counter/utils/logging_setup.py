"""Logging configuration for the tally counter.

A single stream handler is attached to the ``tally_counter`` logger.
Calling :func:`configure_logging` again only adjusts the level, so the
launcher and the tests can both call it freely.
"""

import logging
from typing import Union

LOGGER_NAME = "tally_counter"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_configured = False


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level as an int or a name such as ``"DEBUG"``

    Returns:
        The configured ``tally_counter`` logger
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _configured = True

    return logger
