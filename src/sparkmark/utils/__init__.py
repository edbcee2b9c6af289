"""Utility modules for sparkmark.

Provides:
- logger: get_logger for logging
"""

from sparkmark.utils.logger import get_logger

__all__ = [
    "get_logger",
]
