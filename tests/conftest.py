"""Test configuration and fixtures."""

import httpx
import pytest

from n8n_mcp import mcp_server
from n8n_mcp.client import N8nClient

BASE_URL = "http://n8n.test:5678"
API_KEY = "test-api-key"

ENV_VARS = (
    "N8N_BASE_URL",
    "N8N_API_KEY",
    "CF_ACCESS_CLIENT_ID",
    "CF_ACCESS_CLIENT_SECRET",
    "N8N_REQUEST_TIMEOUT",
    "MCP_TRANSPORT",
    "MCP_HOST",
    "MCP_PORT",
)


class FakeN8n:
    """Records requests and answers them from a (method, path) route table."""

    def __init__(self):
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, response: httpx.Response) -> None:
        self.routes[(method, path)] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.raw_path.decode())
        if key not in self.routes:
            return httpx.Response(404, json={"message": f"no route for {key}"})
        return self.routes[key]


@pytest.fixture
def clean_env(monkeypatch):
    """Environment with every n8n/MCP variable unset."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def n8n_env(clean_env):
    """Environment pointing at the fake n8n with a valid API key."""
    clean_env.setenv("N8N_BASE_URL", BASE_URL + "/")
    clean_env.setenv("N8N_API_KEY", API_KEY)
    return clean_env


@pytest.fixture
def fake_n8n():
    return FakeN8n()


@pytest.fixture
def n8n_client(fake_n8n):
    return N8nClient(transport=httpx.MockTransport(fake_n8n))


@pytest.fixture
def server_client(monkeypatch, n8n_client):
    """Point the MCP tools at the fake n8n."""
    monkeypatch.setattr(mcp_server, "client", n8n_client)
    return n8n_client
