"""
Core module for the Organization Manager.

This module contains the exception hierarchy shared by the client,
the orchestrator and the CLI.
"""

from org_manager.core.exceptions import (
    OrgManagerError,
    ConfigurationError,
    AccessError,
    MigrationError,
    AuthenticationError,
    ApiError,
)

__all__ = [
    "OrgManagerError",
    "ConfigurationError",
    "AccessError",
    "MigrationError",
    "AuthenticationError",
    "ApiError",
]
