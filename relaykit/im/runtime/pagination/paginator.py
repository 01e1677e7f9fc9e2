"""Cursor-driven pagination over a single-page fetch function.

Architecture:
    The paginator sits between a consumer and a ``PageFetcher``, the callable
    that performs exactly one round trip for ``(limit, cursor)``. It exposes:
    - next(): one page per call, the caller threads the cursor
    - pages(): successive pages until the server stops returning a cursor
    - all(): the items of those pages as one lazy async iterator

Design Decisions:
    - Explicit loop with the cursor as loop state (no recursion), so very
      long listings do not grow the call stack
    - One fetch in flight at a time: page n+1 can only be addressed with the
      cursor returned by page n
    - Lazy: items of a page are handed out before the next page is requested,
      and a consumer that stops iterating stops the fetching
    - No retries: every failure ends the traversal. Items already yielded stay
      with the consumer

Error Handling:
    Library errors raised by the fetcher (ProviderError, ProtocolViolationError,
    ...) propagate unchanged. Any other exception is wrapped in
    FetchFailedError with the original as ``__cause__``. Task cancellation is
    never wrapped.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable
from contextlib import aclosing
from time import perf_counter
from typing import Generic, Protocol, TypeVar

from ...core.exceptions import FetchFailedError, IMError, ProtocolViolationError
from ...models.page import Cursor, Page, PageRequest
from .telemetry import log_page_error, log_page_fetched, log_traversal_complete

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PageFetcher(Protocol[T_co]):
    """Performs one page round trip.

    Implementations receive the page size and the cursor from the previous
    page (``None`` for the first page) and return the page. Rejecting a stale
    or foreign cursor is the fetcher's job.
    """

    def __call__(self, limit: int, cursor: Cursor | None) -> Awaitable[Page[T_co]]: ...


class CursorPaginator(Generic[T]):
    """Drives a PageFetcher one page at a time or across a full listing.

    Example:
        >>> paginator = CursorPaginator(fetch_groups, name="list_groups")
        >>> page = await paginator.next(20)
        >>> async for group in paginator.all(20):
        ...     print(group.name)
    """

    def __init__(self, fetcher: PageFetcher[T], *, name: str = "paginator") -> None:
        """Initialize paginator.

        Args:
            fetcher: Async callable performing one page round trip
            name: Identifier used in log records
        """
        self._fetcher = fetcher
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def next(self, limit: int, cursor: Cursor | None = None) -> Page[T]:
        """Fetch a single page.

        Args:
            limit: Maximum number of items the server should return (> 0)
            cursor: None for the first page, otherwise ``next_cursor`` of the
                previous page

        Returns:
            The page exactly as the fetcher returned it

        Raises:
            InvalidArgumentError: If limit is not a positive integer (no request sent)
            FetchFailedError: If the fetch fails
        """
        request = PageRequest(limit=limit, cursor=cursor)
        return await self._fetch(request, page_index=0)

    def pages(self, limit: int) -> AsyncIterator[Page[T]]:
        """Iterate over every page of the listing.

        ``limit`` is validated immediately; nothing is fetched until the
        iterator is consumed.

        Raises:
            InvalidArgumentError: If limit is not a positive integer
        """
        PageRequest(limit=limit)
        return self._iter_pages(limit)

    def all(self, limit: int) -> AsyncIterator[T]:
        """Iterate over every item of the listing, fetching pages on demand.

        The returned iterator is single-use and must have a single consumer.
        If a fetch fails, the iterator raises after the items already
        yielded and fetches nothing more.

        Raises:
            InvalidArgumentError: If limit is not a positive integer
        """
        PageRequest(limit=limit)
        return self._iter_items(limit)

    async def _iter_pages(self, limit: int) -> AsyncIterator[Page[T]]:
        cursor: Cursor | None = None
        page_index = 0
        while True:
            page = await self._fetch(PageRequest(limit=limit, cursor=cursor), page_index)
            yield page

            # The cursor is opaque: only None ends the listing
            if page.next_cursor is None:
                return
            cursor = page.next_cursor
            page_index += 1

    async def _iter_items(self, limit: int) -> AsyncIterator[T]:
        started = perf_counter()
        pages_fetched = 0
        items_yielded = 0

        async with aclosing(self._iter_pages(limit)) as pages:
            async for page in pages:
                pages_fetched += 1
                for item in page.items:
                    items_yielded += 1
                    yield item

        log_traversal_complete(
            paginator=self._name,
            pages_fetched=pages_fetched,
            items_yielded=items_yielded,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

    async def _fetch(self, request: PageRequest, page_index: int) -> Page[T]:
        started = perf_counter()
        try:
            page = await self._fetcher(request.limit, request.cursor)
        except IMError as e:
            if isinstance(e, FetchFailedError) and e.page_index is None:
                e.page_index = page_index
            log_page_error(
                paginator=self._name,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        except Exception as e:
            log_page_error(
                paginator=self._name,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise FetchFailedError(
                f"{self._name}: page {page_index} fetch failed: {e}", page_index=page_index
            ) from e

        if not isinstance(page, Page):
            log_page_error(
                paginator=self._name,
                page_index=page_index,
                error_type="ProtocolViolationError",
                error_message=f"fetcher returned {type(page).__name__}",
            )
            raise ProtocolViolationError(
                f"{self._name}: expected a Page, got {type(page).__name__}",
                page_index=page_index,
            )

        log_page_fetched(
            paginator=self._name,
            page_index=page_index,
            limit=request.limit,
            item_count=len(page.items),
            has_next=page.next_cursor is not None,
            latency_ms=(perf_counter() - started) * 1000.0,
        )
        return page
