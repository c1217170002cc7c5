"""Async client for the 1-Click swap API's execution status endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .base import ExecutionStatusProvider
from ..config import settings

logger = logging.getLogger(__name__)


class StatusFetchFailed(Exception):
    """The raw status payload could not be retrieved or decoded.

    Transient; pollers may retry with backoff.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class OneClickProvider(ExecutionStatusProvider):
    """Thin wrapper around ``GET /v0/status`` of https://1click.chaindefuser.com."""

    name = "one_click"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        jwt: Optional[str] = None,
        timeout_s: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.one_click_base_url).rstrip("/")
        self.jwt = settings.one_click_jwt if jwt is None else jwt
        self.timeout_s = timeout_s or settings.request_timeout_seconds
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"accept": "application/json"}
        if self.jwt:
            headers["authorization"] = f"Bearer {self.jwt}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_s,
            headers=self._headers(),
            transport=self._transport,
        )

    async def ready(self) -> bool:
        return bool(self.base_url)

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "unavailable", "reason": "No base URL configured"}
        return {
            "status": "healthy",
            "base_url": self.base_url,
            "authenticated": bool(self.jwt),
        }

    async def get_execution_status(self, deposit_address: str) -> Dict[str, Any]:
        """Fetch the raw status payload for ``deposit_address``.

        Raises StatusFetchFailed on transport errors, non-2xx responses and
        bodies that are not a JSON object.
        """
        try:
            async with self._client() as client:
                response = await client.get("/v0/status", params={"depositAddress": deposit_address})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text or exc.response.reason_phrase
            raise StatusFetchFailed(
                f"Status request failed with {exc.response.status_code}: {detail}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise StatusFetchFailed(f"Status request failed: {exc}") from exc
        except ValueError as exc:
            raise StatusFetchFailed(f"Status response is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise StatusFetchFailed(f"Unexpected status response type: {type(data).__name__}")

        logger.debug("Execution status for %s: %s", deposit_address, data)
        return data
