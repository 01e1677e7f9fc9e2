"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation and bearer token injection.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from relaykit.im.auth import StaticTokenProvider
from relaykit.im.runtime.rest import RESTTransport


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        transport = RESTTransport(base_url="https://im.example.com")
        assert transport.http.base_url == "https://im.example.com"

    def test_add_response_hook(self):
        transport = RESTTransport(base_url="https://im.example.com")
        hook = MagicMock()

        transport.add_response_hook(hook)

        assert hook in transport.http._response_hooks

    @pytest.mark.asyncio
    async def test_get_without_token_provider(self):
        transport = RESTTransport(base_url="https://im.example.com")
        transport.http.get = AsyncMock(return_value={"data": "test"})

        result = await transport.get("/test", params={"key": "value"})

        assert result == {"data": "test"}
        transport.http.get.assert_called_once_with("/test", params={"key": "value"}, headers=None)

    @pytest.mark.asyncio
    async def test_get_adds_bearer_token(self):
        transport = RESTTransport(
            base_url="https://im.example.com", token_provider=StaticTokenProvider("abc")
        )
        transport.http.get = AsyncMock(return_value={})

        await transport.get("/test", headers={"X-Trace": "1"})

        transport.http.get.assert_called_once_with(
            "/test", params=None, headers={"X-Trace": "1", "Authorization": "Bearer abc"}
        )

    @pytest.mark.asyncio
    async def test_post_delegates_to_http_client(self):
        transport = RESTTransport(
            base_url="https://im.example.com", token_provider=StaticTokenProvider("abc")
        )
        transport.http.post = AsyncMock(return_value={"data": "created"})

        result = await transport.post("/test", json_body={"key": "value"})

        assert result == {"data": "created"}
        transport.http.post.assert_called_once_with(
            "/test", json={"key": "value"}, headers={"Authorization": "Bearer abc"}
        )

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://im.example.com")
        transport.http.close = AsyncMock()

        await transport.close()

        transport.http.close.assert_called_once()
