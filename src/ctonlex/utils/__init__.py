"""Utility modules for ctonlex.

Provides:
- logger: get_logger for logging
"""

from ctonlex.utils.logger import get_logger

__all__ = [
    "get_logger",
]
