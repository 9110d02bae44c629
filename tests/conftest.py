"""
Pytest configuration and fixtures for the Organization Manager tests.

HTTP traffic goes to an in-memory fake of the platform through
httpx.MockTransport, and console output is captured in a StringIO.
"""

import io
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest
from rich.console import Console

from org_manager.client.api import PlatformClient
from org_manager.models.config import ManagerSettings
from org_manager.orchestrator.transfer import TransferOrchestrator
from org_manager.utils.output import ProgressOutput

API_KEY = "secret-api-key"
API_HOST = "api.example.test"
MANAGER_HOST = "manager.example.test"


class FakePlatform:
    """Canned responses keyed by (method, host, path), with a request log."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str, str], List[Dict[str, Any]]] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, host: str, path: str, status: int,
           json: Optional[Any] = None, text: Optional[str] = None) -> "FakePlatform":
        """Queue a response; the last queued response for a route repeats."""
        canned: Dict[str, Any] = {"status_code": status}
        if json is not None:
            canned["json"] = json
        elif text is not None:
            canned["text"] = text
        self.routes.setdefault((method, host, path), []).append(canned)
        return self

    def on_connect_error(self, method: str, host: str, path: str) -> "FakePlatform":
        """Queue a connection failure for a route."""
        self.routes.setdefault((method, host, path), []).append({"connect_error": True})
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.host, request.url.path)
        queue = self.routes.get(key)
        if not queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        canned = queue.pop(0) if len(queue) > 1 else queue[0]
        if canned.get("connect_error"):
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(**canned)

    def paths(self, method: Optional[str] = None) -> List[str]:
        return [r.url.path for r in self.requests if method is None or r.method == method]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings() -> ManagerSettings:
    return ManagerSettings(manager_host=MANAGER_HOST, api_host=API_HOST)


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def client(settings: ManagerSettings, platform: FakePlatform) -> PlatformClient:
    return PlatformClient(settings, API_KEY, transport=platform.transport)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def orchestrator(client: PlatformClient, console: Console) -> TransferOrchestrator:
    return TransferOrchestrator(client, ProgressOutput(console))


@pytest.fixture
def printed(console: Console):
    """Return a callable giving everything printed so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def cli_obj(settings: ManagerSettings, platform: FakePlatform) -> Dict[str, Any]:
    """Context object for CliRunner.invoke that wires the CLI to the fake platform."""
    return {"settings": settings, "api_key": API_KEY, "transport": platform.transport}
