"""Utility modules for criticmark.

Provides:
- logger: get_logger for logging
"""

from criticmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
