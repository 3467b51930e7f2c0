"""
remixr/utils/logger.py

Logger factory shared by all remixr modules.
"""

import logging

from remixr.config import Config

_ROOT_LOGGER_NAME = "remixr"
_configured = False


def _configure_root_logger() -> None:
    """Attach a single stream handler to the package root logger."""
    global _configured
    if _configured:
        return
    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=Config.LOG_FORMAT, datefmt=Config.LOG_DATE_FORMAT))
        root_logger.addHandler(handler)
    root_logger.setLevel(Config.LOG_LEVEL)
    root_logger.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the remixr hierarchy.
    Args:
        name: Usually the caller's __name__.
    Returns:
        A configured logging.Logger.
    """
    _configure_root_logger()
    if name != _ROOT_LOGGER_NAME and not name.startswith(f"{_ROOT_LOGGER_NAME}."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
