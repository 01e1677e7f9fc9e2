"""Cursor pagination layer.

This module turns a single-page fetch function into page-at-a-time and
full-listing iteration over cursor-paginated endpoints.

Architecture:
    - paginator.py: PageFetcher protocol and CursorPaginator driver
    - telemetry.py: Structured logging for fetches and traversals
"""

from __future__ import annotations

from .paginator import CursorPaginator, PageFetcher

__all__ = [
    "CursorPaginator",
    "PageFetcher",
]
