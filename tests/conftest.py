"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from armrest_cli.client.transport import ArmClient
from armrest_cli.config.manager import ConfigManager
from armrest_cli.config.models import ArmrestConfiguration

SUB = "00000000-1111-2222-3333-444444444444"
ARM = "https://management.azure.com"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep host credentials and the user's config file out of every test."""
    for var in (
        "AZURE_SUBSCRIPTION_ID",
        "AZURE_TENANT_ID",
        "AZURE_CLIENT_ID",
        "AZURE_CLIENT_SECRET",
        "AZURE_ACCESS_TOKEN",
        "AZURE_RESOURCE_GROUP",
        "ARMREST_PROFILE",
    ):
        monkeypatch.delenv(var, raising=False)
    with patch(
        "armrest_cli.commands._common.ConfigManager",
        return_value=ConfigManager(config_path=tmp_path / "cli-config.toml"),
    ):
        yield


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ArmrestConfiguration:
    """Return a sample subscription profile for testing."""
    return ArmrestConfiguration(
        name="test-sub",
        subscription_id=SUB,
        token="testtoken-abcdef",
        resource_group="rg-default",
    )


class RequestSpy:
    """Mock transport handler that records requests and replays canned responses.

    ``routes`` maps ``(method, path)`` to a response or a callable taking
    the request. Anything unrouted answers 500.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], httpx.Response | Callable[[httpx.Request], httpx.Response]] = {}

    def add(self, method: str, path: str, response) -> None:
        self.routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(500, json={"error": {"code": "Unrouted", "message": request.url.path}})
        if callable(route):
            return route(request)
        # Fresh copy per call; the aggregator hits routes from several threads
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)


@pytest.fixture
def spy() -> RequestSpy:
    return RequestSpy()


@pytest.fixture
def make_client(sample_profile: ArmrestConfiguration, spy: RequestSpy):
    """Build an ArmClient wired to the request spy."""
    clients: list[ArmClient] = []

    def factory(**overrides) -> ArmClient:
        configuration = sample_profile.model_copy(update=overrides)
        client = ArmClient(configuration, transport=httpx.MockTransport(spy))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


def _vm_payload(name: str, group: str = "rg1", location: str = "eastus") -> dict:
    return {
        "id": (
            f"/subscriptions/{SUB}/resourceGroups/{group}"
            f"/providers/Microsoft.Compute/virtualMachines/{name}"
        ),
        "name": name,
        "type": "Microsoft.Compute/virtualMachines",
        "location": location,
        "properties": {
            "provisioningState": "Succeeded",
            "hardwareProfile": {"vmSize": "Standard_B2s"},
        },
    }


@pytest.fixture
def vm_payload():
    """Factory for virtual machine response bodies."""
    return _vm_payload
