"""
Environment-driven configuration for the n8n MCP server.

Everything here reads os.environ at call time. Nothing is cached, so a
missing API key only fails the calls that need it.

Environment:
  N8N_BASE_URL             (default: http://localhost:5678)
  N8N_API_KEY              required for every call except the health check
  CF_ACCESS_CLIENT_ID      optional Cloudflare Access service token id
  CF_ACCESS_CLIENT_SECRET  optional Cloudflare Access service token secret
  N8N_REQUEST_TIMEOUT      optional request timeout in seconds
  MCP_TRANSPORT            stdio | streamable-http | sse (default: stdio)
  MCP_HOST / MCP_PORT      bind address for the HTTP transports
"""

import os

from dotenv import load_dotenv

from n8n_mcp.errors import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:5678"
DEFAULT_MCP_HOST = "127.0.0.1"
DEFAULT_MCP_PORT = 8000

API_KEY_HEADER = "X-N8N-API-KEY"
CF_CLIENT_ID_HEADER = "CF-Access-Client-Id"
CF_CLIENT_SECRET_HEADER = "CF-Access-Client-Secret"

TRANSPORTS = ("stdio", "streamable-http", "sse")


def load_environment() -> None:
    """Load a .env file into os.environ without overriding what is already set."""
    load_dotenv(override=False)


def get_base_url() -> str:
    raw = os.getenv("N8N_BASE_URL") or DEFAULT_BASE_URL
    return raw.rstrip("/")


def get_headers() -> dict[str, str]:
    """
    Build the authenticated header set for the n8n REST API.

    Raises ConfigurationError when N8N_API_KEY is not set. The Cloudflare
    Access headers are added only when both halves of the token are present.
    """
    api_key = os.getenv("N8N_API_KEY")
    if not api_key:
        raise ConfigurationError(
            "Missing N8N_API_KEY. Generate one in n8n (Settings -> n8n API) "
            "and export it in the environment of the MCP host."
        )

    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        API_KEY_HEADER: api_key,
    }

    cf_id = os.getenv("CF_ACCESS_CLIENT_ID")
    cf_secret = os.getenv("CF_ACCESS_CLIENT_SECRET")
    if cf_id and cf_secret:
        headers[CF_CLIENT_ID_HEADER] = cf_id
        headers[CF_CLIENT_SECRET_HEADER] = cf_secret

    return headers


def get_request_timeout() -> float | None:
    """Seconds from N8N_REQUEST_TIMEOUT, or None to keep the httpx default."""
    raw = os.getenv("N8N_REQUEST_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"N8N_REQUEST_TIMEOUT must be a number of seconds, got {raw!r}")


def get_transport() -> str:
    transport = (os.getenv("MCP_TRANSPORT") or "stdio").strip().lower()
    if transport not in TRANSPORTS:
        raise ConfigurationError(
            f"Unsupported MCP_TRANSPORT {transport!r}; expected one of {', '.join(TRANSPORTS)}"
        )
    return transport


def get_http_bind() -> tuple[str, int]:
    host = os.getenv("MCP_HOST") or DEFAULT_MCP_HOST
    raw_port = os.getenv("MCP_PORT") or str(DEFAULT_MCP_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigurationError(f"MCP_PORT must be an integer, got {raw_port!r}")
    return host, port
