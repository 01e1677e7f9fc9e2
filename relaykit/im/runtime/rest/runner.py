"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...models.page import Cursor, Page
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        if spec.method.upper() == "GET":
            data = await self._t.get(path, params=query, headers=headers)
        else:
            data = await self._t.post(path, json_body=body, headers=headers)

        return adapter.parse(data, params)

    def page_fetcher(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Callable[[int, Cursor | None], Any]:
        """Bind an endpoint to a page fetch function for CursorPaginator.

        Each call runs the endpoint once with ``limit`` and ``cursor`` merged
        into ``params``. The adapter must return a Page.
        """

        async def fetch(limit: int, cursor: Cursor | None) -> Page[Any]:
            return await self.run(
                spec=spec,
                adapter=adapter,
                params={**params, "limit": limit, "cursor": cursor},
            )

        return fetch
