"""Utility modules for strjoiner.

Provides:
- logger: get_logger for logging
"""

from strjoiner.utils.logger import get_logger

__all__ = [
    "get_logger",
]
