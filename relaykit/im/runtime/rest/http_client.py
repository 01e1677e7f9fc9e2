"""HTTP client helper."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import aiohttp

from ...core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ProtocolViolationError,
    ProviderError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], None]


def map_http_error(
    status: int,
    body: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
) -> ProviderError:
    """Translate an HTTP error response into a library exception.

    Args:
        status: HTTP status code (>= 400)
        body: Decoded JSON error body, if any. The server reports
            ``{"error": ..., "error_description": ...}``
        headers: Response headers (used for ``Retry-After``)

    Returns:
        The exception to raise
    """
    body = body or {}
    error = body.get("error")
    description = body.get("error_description") or error or f"HTTP {status}"
    message = f"{description} (status {status})"

    if status in (401, 403):
        return AuthenticationError(message, status_code=status, error=error)
    if status == 404:
        return NotFoundError(message, error=error)
    if status == 429:
        retry_after = 60
        raw = (headers or {}).get("Retry-After")
        if raw is not None and str(raw).isdigit():
            retry_after = int(raw)
        return RateLimitError(message, retry_after=retry_after, error=error)
    return ProviderError(message, status_code=status, error=error)


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callback invoked with every response before it is decoded."""
        self._response_hooks.append(hook)

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        async with self.session.get(self._url(url), params=params, headers=headers) as response:
            return await self._handle(response)

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request."""
        async with self.session.post(self._url(url), json=json, headers=headers) as response:
            return await self._handle(response)

    async def _handle(self, response: aiohttp.ClientResponse) -> Any:
        for hook in self._response_hooks:
            hook(response)

        if response.status >= 400:
            body = await self._error_body(response)
            error = map_http_error(response.status, body, response.headers)
            logger.warning(
                "http_error",
                extra={
                    "status": response.status,
                    "error": error.error,
                    "url": str(response.url),
                },
            )
            raise error

        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise ProtocolViolationError(f"Response body is not valid JSON: {e}") from e

    async def _error_body(self, response: aiohttp.ClientResponse) -> dict[str, Any] | None:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
