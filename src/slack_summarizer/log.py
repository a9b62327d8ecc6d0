"""Logging configuration with Rich formatting.

Provides setup_logging() for app initialization and get_logger() for module-level loggers.
"""

import logging
from typing import Optional
from rich.logging import RichHandler
from .config import get_settings

def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=level or get_settings().LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )

    # Quiet down some noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("slack_sdk").setLevel(logging.WARNING)

def get_logger(name: str):
    return logging.getLogger(name)
