"""
Logging configuration for the Organization Manager.

Log records go to stderr so they never interleave with the progress
output a command prints on stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "org_manager"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Set up logging for the Organization Manager.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True
    )
    logger.addHandler(console_handler)

    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
