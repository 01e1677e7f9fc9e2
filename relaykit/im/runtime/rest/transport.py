"""Authenticated REST transport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .http_client import HTTPClient, ResponseHook

if TYPE_CHECKING:
    from ...auth.token import TokenProvider


class RESTTransport:
    """Sends requests through an HTTPClient with a bearer token attached."""

    def __init__(
        self,
        base_url: str,
        token_provider: TokenProvider | None = None,
        *,
        timeout: float = 30.0,
        http: HTTPClient | None = None,
    ) -> None:
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout)
        self._token_provider = token_provider

    @property
    def http(self) -> HTTPClient:
        return self._http

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def _headers(self, headers: dict[str, str] | None) -> dict[str, str] | None:
        if self._token_provider is None:
            return headers
        token = await self._token_provider.get_token()
        return {**(headers or {}), "Authorization": f"Bearer {token}"}

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=await self._headers(headers))

    async def post(
        self,
        path: str,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json_body, headers=await self._headers(headers))

    async def close(self) -> None:
        await self._http.close()
