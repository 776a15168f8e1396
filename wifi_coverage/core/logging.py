"""Logging setup for the coverage engine."""

import logging
from typing import Optional, Union

from wifi_coverage.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once; only one handler is ever installed.

    Args:
        level: Log level override, defaults to settings.LOG_LEVEL

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger("wifi_coverage")
    package_logger.setLevel(level if level is not None else settings.LOG_LEVEL)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
