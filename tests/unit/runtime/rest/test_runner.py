"""Precise unit tests for RestRunner.

Tests focus on spec-driven request building and page fetcher binding.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from relaykit.im.models import Cursor, Page
from relaykit.im.runtime.pagination import CursorPaginator
from relaykit.im.runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner


@pytest.fixture
def mock_transport():
    transport = MagicMock()
    transport.get = AsyncMock(return_value={"data": "test"})
    transport.post = AsyncMock(return_value={"data": "test"})
    return transport


@pytest.fixture
def mock_adapter():
    adapter = MagicMock(spec=ResponseAdapter)
    adapter.parse = MagicMock(side_effect=lambda response, params: response)
    return adapter


@pytest.fixture
def runner(mock_transport):
    return RestRunner(mock_transport)


class TestRestRunner:
    """Test RestRunner.run()."""

    @pytest.mark.asyncio
    async def test_get_with_query_and_headers(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: f"/items/{p['id']}",
            build_query=lambda p: {"limit": p["limit"]},
            build_headers=lambda p: {"X-Id": p["id"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"id": "7", "limit": 3})

        mock_transport.get.assert_called_once_with(
            "/items/7", params={"limit": 3}, headers={"X-Id": "7"}
        )

    @pytest.mark.asyncio
    async def test_post_with_body(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="POST",
            build_path=lambda p: "/test",
            build_body=lambda p: {"name": p["name"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"name": "x"})

        mock_transport.post.assert_called_once_with("/test", json_body={"name": "x"}, headers=None)

    @pytest.mark.asyncio
    async def test_adapter_receives_params(self, runner, mock_adapter):
        spec = RestEndpointSpec(id="test", method="GET", build_path=lambda p: "/test")

        await runner.run(spec=spec, adapter=mock_adapter, params={"key": "value"})

        call_args = mock_adapter.parse.call_args
        assert call_args[0][0] == {"data": "test"}
        assert call_args[0][1] == {"key": "value"}


class PagingAdapter(ResponseAdapter):
    def parse(self, response, params):
        return Page(items=response["items"], next_cursor=response.get("cursor"))


class TestPageFetcher:
    """Test RestRunner.page_fetcher()."""

    @pytest.mark.asyncio
    async def test_fetcher_merges_limit_and_cursor(self, runner, mock_transport):
        mock_transport.get = AsyncMock(return_value={"items": ["a"], "cursor": "n1"})
        spec = RestEndpointSpec(
            id="paged",
            method="GET",
            build_path=lambda p: f"/things/{p['owner']}",
            build_query=lambda p: {"limit": p["limit"], "cursor": p["cursor"]},
        )

        fetch = runner.page_fetcher(spec=spec, adapter=PagingAdapter(), params={"owner": "o1"})
        page = await fetch(5, Cursor("c0"))

        assert page.items == ["a"]
        assert page.next_cursor == "n1"
        mock_transport.get.assert_called_once_with(
            "/things/o1", params={"limit": 5, "cursor": "c0"}, headers=None
        )

    @pytest.mark.asyncio
    async def test_fetcher_drives_paginator(self, runner, mock_transport):
        mock_transport.get = AsyncMock(
            side_effect=[
                {"items": [1, 2], "cursor": "n1"},
                {"items": [3]},
            ]
        )
        spec = RestEndpointSpec(
            id="paged",
            method="GET",
            build_path=lambda p: "/things",
            build_query=lambda p: {"limit": p["limit"], "cursor": p["cursor"]},
        )
        paginator = CursorPaginator(
            runner.page_fetcher(spec=spec, adapter=PagingAdapter(), params={})
        )

        items = [item async for item in paginator.all(2)]

        assert items == [1, 2, 3]
        queries = [call.kwargs["params"] for call in mock_transport.get.call_args_list]
        assert queries == [{"limit": 2, "cursor": None}, {"limit": 2, "cursor": "n1"}]
