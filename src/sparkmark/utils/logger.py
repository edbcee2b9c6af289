"""Minimal logging utilities for sparkmark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from sparkmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Unterminated fence at line %d", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "sparkmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'sparkmark.mymodule'
    """
    if not (name == "sparkmark" or name.startswith("sparkmark.")):
        name = f"sparkmark.{name}"
    return logging.getLogger(name)
