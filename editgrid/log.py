"""Logging utilities for editgrid.

Usage errors and rejected edits are reported here; the engine only raises
when a grid runs in strict mode.
"""

from __future__ import annotations

import logging
import sys


DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _LoggerHolder:
    """Holder for the global logger instance."""

    instance: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Get the editgrid logger instance.

    Returns
    -------
    logging.Logger
        The editgrid logger configured with a stream handler.
    """
    if _LoggerHolder.instance is None:
        logger = logging.getLogger("editgrid")
        logger.setLevel(logging.WARNING)

        # Only add handler if none exists
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            logger.addHandler(handler)

        _LoggerHolder.instance = logger

    return _LoggerHolder.instance


def debug(msg: str) -> None:
    """Log a debug message."""
    get_logger().debug(msg)


def info(msg: str) -> None:
    """Log an info message."""
    get_logger().info(msg)


def warn(msg: str) -> None:
    """Log a warning message. Never raises exceptions.

    Parameters
    ----------
    msg : str
        The warning message to log.
    """
    get_logger().warning(msg)


def error(msg: str) -> None:
    """Log an error message. Never raises exceptions.

    Parameters
    ----------
    msg : str
        The error message to log.
    """
    get_logger().error(msg)


def exception(msg: str) -> None:
    """Log an exception with full traceback.

    Call this from within an except block.
    """
    get_logger().exception(msg)


def set_level(level: int | str) -> None:
    """Set the logging level.

    Parameters
    ----------
    level : int or str
        The logging level (e.g., logging.DEBUG, "DEBUG").
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    get_logger().setLevel(level)


def set_format(fmt: str) -> None:
    """Replace the formatter on every handler of the editgrid logger."""
    formatter = logging.Formatter(fmt)
    for handler in get_logger().handlers:
        handler.setFormatter(formatter)


def enable_debug() -> None:
    """Enable verbose logging of sort, filter, pagination and edit operations."""
    set_level(logging.DEBUG)


def log_callback_error(event: str, grid_name: str, exc: BaseException) -> None:
    """Log a notification handler error with standardized format.

    Parameters
    ----------
    event : str
        The event that triggered the handler.
    grid_name : str
        The name of the grid emitting the event.
    exc : BaseException
        The exception that was raised.
    """
    get_logger().exception(f"Callback error for '{event}' on grid '{grid_name}': {exc}")
