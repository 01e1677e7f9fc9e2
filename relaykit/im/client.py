"""High-level client for one IM application.

Wires the HTTP client, token provider, transport and runner from a
ClientConfig and exposes the API groups::

    async with IMClient(ClientConfig.from_env()) as client:
        async for group in client.groups.list_all_groups():
            print(group.group_id)
"""

from __future__ import annotations

from .auth import AppTokenProvider, StaticTokenProvider, TokenProvider
from .core.config import ClientConfig
from .groups import GroupApi
from .runtime.rest import HTTPClient, RestRunner, RESTTransport


class IMClient:
    """REST client bound to a single ``org/app``."""

    def __init__(
        self, config: ClientConfig, *, token_provider: TokenProvider | None = None
    ) -> None:
        self.config = config
        self._http = HTTPClient(base_url=config.app_url, timeout=config.timeout)
        self._token_provider = token_provider or self._default_token_provider()
        self._transport = RESTTransport(
            config.app_url, self._token_provider, http=self._http
        )
        self._runner = RestRunner(self._transport)
        self.groups = GroupApi(
            self._runner,
            app_key=config.app_key,
            default_page_size=config.default_page_size,
        )
        self._closed = False

    @property
    def token_provider(self) -> TokenProvider:
        """Provider supplying the bearer token for every request.

        Call ``invalidate()`` on an AppTokenProvider to force a refresh, for
        example after the server revoked the current token.
        """
        return self._token_provider

    def _default_token_provider(self) -> TokenProvider:
        config = self.config
        if config.app_token is not None and config.app_token.get_secret_value():
            return StaticTokenProvider(config.app_token.get_secret_value())
        # ClientConfig guarantees the credential pair when no app_token is set
        return AppTokenProvider(
            self._http,
            config.client_id or "",
            config.client_secret.get_secret_value() if config.client_secret else "",
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._closed:
            return
        self._closed = True
        await self._transport.close()

    async def __aenter__(self) -> IMClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
