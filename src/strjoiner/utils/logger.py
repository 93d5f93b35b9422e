"""Minimal logging utilities for strjoiner.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from strjoiner.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Buffer allocated")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "strjoiner." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'strjoiner.mymodule'
    """
    if not (name == "strjoiner" or name.startswith("strjoiner.")):
        name = f"strjoiner.{name}"
    return logging.getLogger(name)
