"""Characters API Client — pass-through access to the Rick and Morty API.

Invariants:
    - Upstream JSON bodies are returned unmodified
    - Only the supported filters are forwarded, and only when provided
    - Non-2xx upstream answers raise UpstreamAPIError with the upstream status
    - Connection failures and timeouts raise UpstreamAPIError with 503
    - No retries: every failure is terminal for the triggering request

Design Decisions:
    - transport is injectable so tests can swap in httpx.MockTransport
"""

import logging
from typing import Any

import httpx

from app.core.errors import UpstreamAPIError

logger = logging.getLogger(__name__)

CHARACTER_FILTERS = ("page", "name", "status", "species", "type", "gender")


class CharactersClient:
    """Thin async wrapper over the characters endpoint of the upstream API."""

    def __init__(
        self,
        base_url: str,
        liveness_url: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.liveness_url = liveness_url or self.base_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self._transport,
        )

    async def list_characters(self, **filters: Any) -> dict:
        """GET <base_url>/character with the provided filters."""
        params = {
            key: value for key, value in filters.items()
            if key in CHARACTER_FILTERS and value is not None
        }
        url = f"{self.base_url}/character"
        try:
            async with self._client() as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(
                f"Characters API unreachable: {e}",
                extra={"upstream_url": url},
            )
            raise UpstreamAPIError("Characters API is unavailable") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                f"Characters API returned {response.status_code}: {message}",
                extra={"upstream_url": url, "status_code": response.status_code},
            )
            raise UpstreamAPIError(message, upstream_status=response.status_code)
        return response.json()

    async def is_alive(self) -> bool:
        """Liveness check against the upstream API (used by /health/readiness)."""
        try:
            async with self._client() as client:
                response = await client.get(self.liveness_url)
        except httpx.HTTPError as e:
            logger.error(f"Characters API liveness check failed: {e}")
            return False
        return response.is_success


def _error_message(response: httpx.Response) -> str:
    """Upstream error text: the API answers {"error": "..."} on failures."""
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or "Characters API error"
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase or "Characters API error"
