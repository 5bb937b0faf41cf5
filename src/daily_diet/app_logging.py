"""Logging configuration helpers."""

import logging

_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the ``daily_diet`` logger with a single stream handler.

    The level is applied on every call so a container built with a different
    ``log_level`` setting takes effect; the handler is only added once.
    """
    logger = logging.getLogger("daily_diet")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
