import logging

import httpx

from app.core.errors import GatewayError
from app.services.hub import HubClient, default_headers

logger = logging.getLogger(__name__)


def _upstream_message(e: Exception) -> str:
    """Pick a human-readable message out of an upstream failure."""
    if isinstance(e, httpx.HTTPStatusError):
        try:
            body = e.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    return str(e) or "Failed to list workspaces"


class WorkspaceService:
    """Lists the deployment workspaces of the storefront account."""

    def __init__(self, hub: HubClient, workspaces_url: str):
        self.hub = hub
        self.workspaces_url = workspaces_url

    def list_workspaces(self, auth_token: str) -> list[dict]:
        try:
            return self.hub.get(self.workspaces_url, default_headers(auth_token))
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Workspace listing failed for {self.workspaces_url}: {e}")
            raise GatewayError(_upstream_message(e)) from e
