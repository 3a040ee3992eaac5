"""Core authcore utilities.

This module exports configuration and logging helpers.
"""

from authcore.core.config import Settings, get_settings
from authcore.core.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
