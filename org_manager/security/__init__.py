"""API key lookup for the Organization Manager."""

from org_manager.security.credentials import CredentialManager

__all__ = ["CredentialManager"]
