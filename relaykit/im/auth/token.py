"""Application token providers.

Every REST call carries an ``Authorization: Bearer <token>`` header. The
transport asks a TokenProvider for the token before each request; providers
decide whether that means returning a fixed value or exchanging client
credentials for a short-lived token.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Protocol

from ..core.exceptions import AuthenticationError, InvalidArgumentError
from ..runtime.rest.http_client import HTTPClient

logger = logging.getLogger(__name__)

# Refresh this many seconds before the server-side expiry
REFRESH_MARGIN_SECONDS = 60


class TokenProvider(Protocol):
    """Source of bearer tokens for REST requests."""

    async def get_token(self) -> str:
        """Return a token valid for the next request."""
        ...


class StaticTokenProvider:
    """Provider returning a token issued out of band."""

    def __init__(self, token: str) -> None:
        if not token:
            raise InvalidArgumentError("token must not be empty")
        self._token = token

    async def get_token(self) -> str:
        return self._token


class AppTokenProvider:
    """Exchanges client credentials for an app token and caches it.

    The token is fetched from ``POST {app_url}/token`` on first use and
    refreshed once it is within REFRESH_MARGIN_SECONDS of expiring.
    Concurrent callers share a single refresh.
    """

    def __init__(
        self,
        http: HTTPClient,
        client_id: str,
        client_secret: str,
        *,
        refresh_margin: float = REFRESH_MARGIN_SECONDS,
    ) -> None:
        self._http = http
        self._client_id = client_id
        self._client_secret = client_secret
        self._refresh_margin = refresh_margin
        self._token: str | None = None
        self._expires_at = 0.0
        self._lock = asyncio.Lock()

    def _is_valid(self) -> bool:
        return self._token is not None and time.monotonic() < self._expires_at

    async def get_token(self) -> str:
        if self._is_valid():
            return self._token  # type: ignore[return-value]
        async with self._lock:
            # Another caller may have refreshed while we waited
            if not self._is_valid():
                await self._refresh()
            return self._token  # type: ignore[return-value]

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a new one."""
        self._token = None
        self._expires_at = 0.0

    async def _refresh(self) -> None:
        body = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
        }
        response = await self._http.post("/token", json=body)
        if not isinstance(response, dict) or not response.get("access_token"):
            raise AuthenticationError("Token response did not contain an access_token")

        expires_in = float(response.get("expires_in") or 0)
        self._token = response["access_token"]
        self._expires_at = time.monotonic() + max(expires_in - self._refresh_margin, 0.0)
        logger.debug("app_token_refreshed", extra={"expires_in": expires_in})
