"""Utility modules for md2md.

Provides:
- logger: get_logger for library logging, configure_logging for entry points
"""

from md2md.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
