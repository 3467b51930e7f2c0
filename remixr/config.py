"""
remixr/config.py

Centralized environment variable configuration.
"""

import logging
import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


class Config():
    """
    Centralized configuration for environment variables.
    Traversal budgets here are only defaults; every public operation accepts explicit budgets.
    """

    # logging
    LOG_LEVEL: int = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s")
    LOG_DATE_FORMAT: str = os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")

    # traversal budgets
    SNAPSHOT_MAX_DEPTH: int = int(os.getenv("SNAPSHOT_MAX_DEPTH", "3"))
    SNAPSHOT_MAX_BREADTH: int = int(os.getenv("SNAPSHOT_MAX_BREADTH", "50"))
    TREE_MAX_DEPTH: int = int(os.getenv("TREE_MAX_DEPTH", "10"))

    # scorer sample caps
    SAMPLE_SIZE: int = int(os.getenv("SAMPLE_SIZE", "50"))

    @classmethod
    def as_dict(cls) -> dict[str, Any]:
        """
        Return a dictionary of all UPPERCASE class attributes and their values.
        Return:
            dict[str, Any]: A dictionary of all UPPERCASE class attributes and their values.
        """
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper()
        }
