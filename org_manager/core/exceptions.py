"""
Custom exceptions for the Organization Manager.

Every error that should abort a command derives from OrgManagerError so the
CLI can report it uniformly. Non-success responses during a transfer phase
are not exceptions; they are reported inline by the orchestrator.
"""

from typing import Any, Dict, Optional


class OrgManagerError(Exception):
    """Base exception class for Organization Manager errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(OrgManagerError):
    """Raised when command flags are missing or conflict."""
    pass


class AccessError(OrgManagerError):
    """Raised when a looked-up app or team does not exist for the caller."""
    pass


class MigrationError(OrgManagerError):
    """Raised when claiming a team's apps to the personal account fails."""
    pass


class AuthenticationError(OrgManagerError):
    """Raised when no API key is available."""
    pass


class ApiError(OrgManagerError):
    """Raised when a lookup request fails unexpectedly."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body
