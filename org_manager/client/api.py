"""
HTTP client for the platform and organization manager APIs.

Each method issues exactly one request and returns the raw response; callers
branch on the status code. A fresh connection is opened for every request.
"""

from typing import Any, Dict, Iterable, Optional
from urllib.parse import quote

import httpx

from ..core.exceptions import ApiError
from ..models.config import ManagerSettings
from ..utils.logging import get_logger

logger = get_logger("client")


def _segment(value: str) -> str:
    return quote(value, safe="")


class PlatformClient:
    """Authenticated access to the endpoints the plugin consumes."""

    def __init__(
        self,
        settings: ManagerSettings,
        api_key: str,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.settings = settings
        self._api_key = api_key
        self._transport = transport

    def _request(self, method: str, base_url: str, path: str, **kwargs: Any) -> httpx.Response:
        # Basic auth with an empty user, same as https://:<key>@host
        with httpx.Client(
            base_url=base_url,
            auth=("", self._api_key),
            headers={"Accept": "application/json"},
            transport=self._transport,
        ) as client:
            try:
                response = client.request(method, path, **kwargs)
            except httpx.HTTPError as e:
                logger.debug(f"{method} {base_url}{path} failed: {e}")
                raise ApiError(
                    f"Request to {base_url}{path} failed: {e}",
                    details={"method": method, "path": path},
                ) from e
        logger.debug(f"{method} {base_url}{path} -> {response.status_code}")
        return response

    def get_app(self, app: str) -> httpx.Response:
        """GET /apps/{app} on the platform API."""
        return self._request("GET", self.settings.api_url, f"/apps/{_segment(app)}")

    def create_transfer(self, organization: str, app: str) -> httpx.Response:
        """Move a personal app into an organization. Succeeds with 201."""
        return self._request(
            "POST",
            self.settings.manager_url,
            f"/v1/organization/{_segment(organization)}/app",
            json={"app_name": app},
        )

    def transfer_out(self, organization: str, app: str) -> httpx.Response:
        """Move an app out of an organization to the personal account. Succeeds with 200."""
        return self._request(
            "POST",
            self.settings.manager_url,
            f"/v1/organization/{_segment(organization)}/app/{_segment(app)}/transfer-out",
            content=b"",
        )

    def get_team(self, team: str) -> httpx.Response:
        """GET /v3/teams/{team} on the platform API."""
        return self._request("GET", self.settings.api_url, f"/v3/teams/{_segment(team)}")

    def claim_team_apps(self, apps: Iterable[str]) -> httpx.Response:
        """Claim every listed app to the personal account in a single request."""
        form: Dict[str, str] = {f"apps[{app}]": "1" for app in apps}
        return self._request(
            "POST",
            self.settings.api_url,
            "/v3/teams/personal/apps",
            data=form,
        )

    def get_user_info(self) -> httpx.Response:
        """GET /v1/user-info on the manager API."""
        return self._request("GET", self.settings.manager_url, "/v1/user-info")
