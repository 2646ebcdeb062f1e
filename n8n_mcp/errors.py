"""
Exceptions raised by the n8n gateway.
"""

from typing import Any


class N8nMcpError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(N8nMcpError):
    """Required configuration (e.g. N8N_API_KEY) is missing or invalid."""


class RemoteApiError(N8nMcpError):
    """
    The n8n REST API answered with a non-2xx status.

    `details` holds the decoded response body, or {"raw": text} when the
    body was not JSON.
    """

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        reason: str = "",
        details: Any = None,
    ):
        self.method = method
        self.path = path
        self.status_code = status_code
        self.reason = reason
        self.details = details
        super().__init__(f"n8n API {method} {path} failed: {status_code} {reason}".rstrip())
