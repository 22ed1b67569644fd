"""
Outbound gateway client for platform APIs.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


def default_headers(auth_token: str) -> dict:
    """Headers for platform calls made on behalf of the caller's session."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "VtexIdclientAutCookie": auth_token,
        "Proxy-Authorization": auth_token,
    }


class HubClient:
    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.BaseTransport] = None):
        self.timeout = timeout
        self.transport = transport
        self._http_client: Optional[httpx.Client] = None

    @property
    def http_client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self.timeout, transport=self.transport)
        return self._http_client

    def get(self, url: str, headers: dict | None = None) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            httpx.HTTPStatusError: The upstream answered with an error status.
            httpx.RequestError: The request could not be completed.
        """
        response = self.http_client.get(url, headers=headers)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        """Close the underlying HTTP client, if one was opened."""
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None
