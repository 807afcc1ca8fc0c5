"""Minimal logging utilities for md2md.

Provides a get_logger function that wraps the standard library logging, and
configure_logging for entry points (the CLI) that need console output.

Example:
    >>> from md2md.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Parsing document")
"""

from __future__ import annotations

import logging
import sys

_ROOT = "md2md"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "md2md." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'md2md.mymodule'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(log_level: int | str, trace_mode: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Only the "md2md" logger is touched, so embedding applications keep
    control of the root logger. Calling this again replaces the handler
    installed by the previous call.

    Args:
        log_level: Numeric logging level or level name (e.g. "DEBUG")
        trace_mode: Emit timestamps and logger names

    Returns:
        The configured package logger
    """
    if isinstance(log_level, int):
        resolved_level = log_level
    else:
        resolved_level = getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(_ROOT)
    logger.setLevel(resolved_level)
    for handler in list(logger.handlers):
        if getattr(handler, "_md2md_console", False):
            logger.removeHandler(handler)

    if trace_mode:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved_level)
    handler.setFormatter(formatter)
    handler._md2md_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
