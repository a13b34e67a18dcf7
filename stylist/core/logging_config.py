"""Logging setup for the ``stylist`` logger tree."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    """Attach a stream handler to ``stylist`` once and set its level.

    Uvicorn only configures its own loggers, so without this handler INFO
    records under ``stylist.*`` never reach stderr.
    """

    logger = logging.getLogger("stylist")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["configure_logging"]
