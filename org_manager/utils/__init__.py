"""
Utilities module for the Organization Manager.

This module contains logging setup and the progress output helper.
"""

from org_manager.utils.logging import (
    setup_logging,
    get_logger,
)
from org_manager.utils.output import ProgressOutput

__all__ = [
    # Logging utilities
    "setup_logging",
    "get_logger",
    # Output
    "ProgressOutput",
]
