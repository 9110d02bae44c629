"""
CLI module for the Organization Manager.

This module provides command-line interface functionality
using Click and Rich.
"""

from org_manager.cli.main import main

__all__ = ["main"]
