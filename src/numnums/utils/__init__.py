"""Utility modules for numnums.

Provides:
- logger: get_logger for logging
"""

from numnums.utils.logger import get_logger

__all__ = [
    "get_logger",
]
