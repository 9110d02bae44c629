"""
Configuration model for the Organization Manager.

Settings are read from the environment once, when the CLI starts, and the
resulting object is passed explicitly to the API client.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_MANAGER_HOST = "manager-api.heroku.com"
DEFAULT_API_HOST = "api.heroku.com"


class ManagerSettings(BaseModel):
    """Hosts the plugin talks to."""
    model_config = ConfigDict(frozen=True)

    manager_host: str = Field(default=DEFAULT_MANAGER_HOST, description="Organization manager API host")
    api_host: str = Field(default=DEFAULT_API_HOST, description="Platform API host")

    @field_validator('manager_host', 'api_host')
    @classmethod
    def normalize_host(cls, v):
        v = v.strip()
        for scheme in ("https://", "http://"):
            if v.startswith(scheme):
                v = v[len(scheme):]
        v = v.rstrip("/")
        if not v:
            raise ValueError('Host must not be empty')
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ManagerSettings":
        """Build settings from MANAGER_HOST and HEROKU_HOST."""
        env = os.environ if environ is None else environ
        return cls(
            manager_host=env.get("MANAGER_HOST") or DEFAULT_MANAGER_HOST,
            api_host=env.get("HEROKU_HOST") or DEFAULT_API_HOST,
        )

    @property
    def manager_url(self) -> str:
        return f"https://{self.manager_host}"

    @property
    def api_url(self) -> str:
        return f"https://{self.api_host}"
