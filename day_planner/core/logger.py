"""
Shared application logger.

Modules get their own logger with ``setup_logger(__name__)``; all of them sit
under the ``day_planner`` logger, which owns the handler and level.
"""

import logging

from day_planner.core.config import get_settings

LOGGER_NAME = "day_planner"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_package_logger() -> logging.Logger:
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        root.setLevel(get_settings().LOG_LEVEL)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger for ``name``, configuring the package logger once."""
    _configure_package_logger()
    return logging.getLogger(name)


logger = setup_logger(LOGGER_NAME)
