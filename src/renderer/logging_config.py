# renderer/logging_config.py
"""Logging configuration for the ray tracer."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "RAYTRACER_LOG_LEVEL"


def setup_logging(level: Optional[str] = None, name: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the named logger (the root logger by default).

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Falls back to the
            RAYTRACER_LOG_LEVEL environment variable, then INFO.
        name: Logger name.

    Returns:
        The configured logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Calling twice must not duplicate output.
    for handler in logger.handlers:
        if getattr(handler, "_raytracer_handler", False):
            handler.setLevel(numeric_level)
            return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._raytracer_handler = True
    logger.addHandler(console_handler)
    return logger
