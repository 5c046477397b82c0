"""Async client for the Discogs REST API."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from discogs_gateway.config import Settings, get_settings
from discogs_gateway.utils.exceptions import DiscogsAPIError

logger = logging.getLogger(__name__)


class DiscogsClient:
    """Thin wrapper around ``httpx.AsyncClient`` for Discogs requests."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.settings.discogs_user_agent,
            "Accept": "application/json",
        }
        token = self.settings.discogs_personal_access_token.strip()
        if token:
            headers["Authorization"] = f"Discogs token={token}"
        return headers

    async def send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a request to the Discogs API and return the raw response.

        Args:
            method: HTTP method
            path: API path, e.g. ``/artists/1``, or an absolute URL
            params: Query string parameters; ``None`` values are dropped
            json: JSON request body

        Raises:
            DiscogsAPIError: on transport failures and non-2xx responses
        """
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.settings.discogs_api_url.rstrip('/')}{path}"

        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                timeout=self.settings.discogs_request_timeout,
            ) as client:
                response = await client.request(method, url, params=query or None, json=json)
        except httpx.TimeoutException as exc:
            logger.warning(f"Discogs request timeout for {method} {path}")
            raise DiscogsAPIError(f"Discogs API request timed out: {method} {path}") from exc
        except httpx.HTTPError as exc:
            logger.error(f"Discogs request failed for {method} {path}: {exc}")
            raise DiscogsAPIError(f"Discogs API request failed: {exc}") from exc

        if response.status_code >= 400:
            message = _error_message(response)
            logger.warning(f"Discogs API returned status {response.status_code} for {method} {path}: {message}")
            raise DiscogsAPIError(
                f"Discogs API error {response.status_code}: {message}",
                status_code=response.status_code,
            )

        return response

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform a request and decode the JSON payload ({} for bodiless responses)."""
        response = await self.send(method, path, params=params, json=json)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as exc:
            raise DiscogsAPIError("Discogs API returned a malformed response", status_code=response.status_code) from exc

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def get_text(self, path: str) -> str:
        """Fetch a non-JSON resource, such as a CSV export, as text."""
        response = await self.send("GET", path)
        return response.text

    async def fetch(self, url: str) -> httpx.Response:
        """Fetch binary content such as an image; the raw response is returned."""
        return await self.send("GET", url)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.reason_phrase


def get_discogs_client() -> DiscogsClient:
    """Return a client configured from the current settings."""
    return DiscogsClient()
