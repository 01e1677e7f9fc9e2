"""Structured logging for cursor pagination.

This module provides telemetry hooks for page fetches, emitting structured
logs for observability. Cursor values are never logged, only whether the
server returned one.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    paginator: str,
    page_index: int,
    limit: int,
    item_count: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        paginator: Paginator name (usually the endpoint id)
        page_index: Zero-based index of the page within its traversal
        limit: Requested page size
        item_count: Number of items the server returned
        has_next: Whether the server returned a continuation cursor
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "paginator": paginator,
            "page_index": page_index,
            "limit": limit,
            "item_count": item_count,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    paginator: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        paginator: Paginator name
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "ClientConnectorError", "ProviderError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "paginator": paginator,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_traversal_complete(
    *,
    paginator: str,
    pages_fetched: int,
    items_yielded: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log the end of a full traversal (clean exhaustion only).

    Args:
        paginator: Paginator name
        pages_fetched: Number of pages fetched
        items_yielded: Number of items handed to the consumer
        total_latency_ms: Wall time of the whole traversal (optional)
    """
    logger.info(
        "traversal_complete",
        extra={
            "paginator": paginator,
            "pages_fetched": pages_fetched,
            "items_yielded": items_yielded,
            "total_latency_ms": total_latency_ms,
        },
    )
