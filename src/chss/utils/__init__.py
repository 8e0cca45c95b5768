"""Utility exports for the chss package."""

from .logger import funclogger, get_logger, set_level
from .to_int import to_int

__all__ = [
    "funclogger",
    "get_logger",
    "set_level",
    "to_int",
]
