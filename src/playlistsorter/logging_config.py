"""Logging configuration for the playlistsorter package."""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Package logger, every module logger is a child of it
logger: logging.Logger = logging.getLogger("playlistsorter")
logger.setLevel(logging.INFO)

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

logger.addHandler(console_handler)

# Prevent propagation to root logger
logger.propagate = False


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the package.

    Args:
        debug: Whether to log at DEBUG level
    """
    if debug:
        enable_debug()
    else:
        disable_debug()


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Sets both the logger and console handler back to INFO level.
    """
    logger.setLevel(logging.INFO)
    console_handler.setLevel(logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger, typically __name__. If None, returns the
            package logger.

    Returns:
        A Logger instance that reports through the package handler.
    """
    if not name or name.split(".")[-1] == "playlistsorter":
        return logger
    # Module names arrive as "playlistsorter.x" or "src.playlistsorter.x"
    if "playlistsorter." in name:
        name = name.split("playlistsorter.", 1)[1]
    return logging.getLogger(f"playlistsorter.{name}")
