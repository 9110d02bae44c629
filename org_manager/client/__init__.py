"""HTTP client for the platform and organization manager APIs."""

from org_manager.client.api import PlatformClient

__all__ = ["PlatformClient"]
