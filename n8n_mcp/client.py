"""
HTTP gateway to the n8n REST API.

One request per call: build the URL and headers from the environment, send,
read the body as text, decode it as JSON when possible and raise
RemoteApiError on non-2xx statuses.
"""

import json
from typing import Any

import httpx

from n8n_mcp.config import get_base_url, get_headers, get_request_timeout
from n8n_mcp.errors import ConfigurationError, RemoteApiError
from n8n_mcp.logging_config import get_logger

logger = get_logger(__name__)

HEALTH_PATH = "/healthz"


def decode_body(text: str) -> Any:
    """
    Decode a response body.

    Empty text -> None. Text that is not JSON -> {"raw": text}.
    """
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


class N8nClient:
    """
    Thin async client for the n8n REST API.

    `transport` is handed to httpx.AsyncClient unchanged; tests pass an
    httpx.MockTransport here.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    def _http_client(self, strict: bool = True) -> httpx.AsyncClient:
        """
        Build a one-shot httpx client.

        With strict=False an invalid N8N_REQUEST_TIMEOUT is logged and the
        httpx default timeout is used instead of raising.
        """
        kwargs: dict[str, Any] = {}
        try:
            timeout = get_request_timeout()
        except ConfigurationError as e:
            if strict:
                raise
            logger.warning("Ignoring invalid timeout: %s", e)
            timeout = None
        if timeout is not None:
            kwargs["timeout"] = timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """
        Send `method path` to n8n and return the decoded response body.

        Raises ConfigurationError (before any I/O) when the API key is
        missing and RemoteApiError when n8n answers with a non-2xx status.
        """
        method = method.upper()
        url = f"{get_base_url()}{path}"
        headers = get_headers()
        content = None if body is None else json.dumps(body)

        logger.info("HTTP %s %s", method, url)
        async with self._http_client() as http:
            resp = await http.request(method, url, headers=headers, content=content)
        text = resp.text
        data = decode_body(text)

        if not resp.is_success:
            logger.error(
                "HTTP %s failed url=%s status=%s reason=%s",
                method,
                url,
                resp.status_code,
                resp.reason_phrase,
            )
            raise RemoteApiError(
                method=method,
                path=path,
                status_code=resp.status_code,
                reason=resp.reason_phrase,
                details=data,
            )

        logger.info("HTTP %s %s -> %s", method, url, resp.status_code)
        return data

    async def health(self) -> dict:
        """
        Unauthenticated GET /healthz.

        Reports the outcome instead of raising, whatever the status code.
        """
        url = f"{get_base_url()}{HEALTH_PATH}"
        logger.info("HTTP GET %s (health)", url)
        async with self._http_client(strict=False) as http:
            resp = await http.get(url)
        logger.info("Health %s -> %s", url, resp.status_code)
        return {
            "url": url,
            "status": resp.status_code,
            "ok": resp.is_success,
            "body": resp.text,
        }
