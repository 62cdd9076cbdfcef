"""Logging setup driven by AppSettings."""

from __future__ import annotations

import logging
import sys

from elbonian.core.config import AppSettings

_HANDLER_NAME = "elbonian"


def configure_logging(settings: AppSettings | None = None, level: str | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``elbonian`` logger.

    Calling this again replaces the handler instead of stacking a second one,
    so the CLI and the API lifespan can both call it safely.
    """
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger("elbonian")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    logger.setLevel((level or settings.log_level).upper())
    return logger
