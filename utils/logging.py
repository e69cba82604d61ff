"""Logging helpers for the image processing tools."""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    """Return the application logger, configured on first use."""

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("imgproc")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER


def configure_engine_logging(level: int = logging.INFO) -> None:
    """Route ``engines.*`` records through the application handler."""

    app_logger = get_logger()
    app_logger.setLevel(level)
    engine_logger = logging.getLogger("engines")
    engine_logger.setLevel(level)
    for handler in app_logger.handlers:
        if handler not in engine_logger.handlers:
            engine_logger.addHandler(handler)
