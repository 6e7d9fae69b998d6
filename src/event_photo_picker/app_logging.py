"""Logging configuration helpers."""

import logging


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger.

    Module loggers (``event_photo_picker.services.loader`` and friends) reach
    the handler through the package logger. Repeated calls only update the level.
    """
    logger = logging.getLogger("event_photo_picker")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
