"""Utility functions for tdremote."""

from tdremote.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
