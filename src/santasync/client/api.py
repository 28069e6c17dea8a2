"""HTTP client for the sync server API.

This module provides:
- HTTPClient: async JSON-over-HTTPS client for the sync endpoints
- APIError, TransportError, DecodeError: failure taxonomy
- RulePage: one decoded page of the rule download endpoint
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from santasync.client.constants import KEY_CURSOR, KEY_EVENTS, KEY_RULES
from santasync.core.config import SyncConfig

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(APIError):
    """Request failed to complete with HTTP 200."""


class DecodeError(APIError):
    """Response body could not be decoded into the expected shape."""


@dataclass
class RulePage:
    """One page of the rule download response."""

    rules: list[Any]
    cursor: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RulePage:
        """Create from a decoded response body.

        A missing, null or empty cursor marks the last page.

        Raises:
            DecodeError: If the body is not an object with a ``rules`` array,
                or carries a cursor that is not a string.
        """
        if not isinstance(data, dict):
            raise DecodeError("Rule download response is not a JSON object", 200)
        rules = data.get(KEY_RULES)
        if not isinstance(rules, list):
            raise DecodeError("Rule download response has no rules array", 200)
        cursor = data.get(KEY_CURSOR)
        if cursor is not None and not isinstance(cursor, str):
            raise DecodeError(f"Rule download cursor is not a string: {cursor!r}", 200)
        return cls(rules=rules, cursor=cursor or None)


class HTTPClient:
    """Async HTTP client for the sync server API."""

    def __init__(
        self,
        config: SyncConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Sync configuration (base URL, timeout, SSL verification).
            transport: Optional transport override.
        """
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.sync_base_url,
            timeout=config.timeout,
            verify=config.verify_ssl,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        """POST a JSON payload and require a 200 response.

        Raises:
            TransportError: On connection failure or any status other than 200.
        """
        try:
            response = await self._client.post(path, json=payload)
        except httpx.RequestError as e:
            raise TransportError(f"Request to {path} failed: {e}") from e
        if response.status_code != 200:
            logger.debug(f"HTTP Response Code: {response.status_code}")
            raise TransportError(
                f"Unexpected status from {path}", response.status_code
            )
        return response

    # === Rule download ===

    async def download_rules(self, cursor: str | None = None) -> RulePage:
        """Fetch one page of rules.

        Args:
            cursor: Continuation token from the previous page, if any.

        Returns:
            The decoded page.

        Raises:
            TransportError: If the request did not return 200.
            DecodeError: If the body is not valid JSON or lacks ``rules``.
        """
        payload: dict[str, Any] = {KEY_CURSOR: cursor} if cursor else {}
        response = await self._post(self._config.rule_download_path, payload)
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError("Failed to decode server's response", 200) from e
        return RulePage.from_dict(data)

    # === Event upload ===

    async def upload_events(self, events: list[dict[str, Any]]) -> None:
        """Upload a batch of serialized events.

        The response body is ignored.

        Args:
            events: Wire-format event records.

        Raises:
            TransportError: If the request did not return 200.
        """
        await self._post(self._config.event_upload_path, {KEY_EVENTS: events})
