"""Runtime components: REST transport and cursor pagination."""

from .pagination import CursorPaginator, PageFetcher
from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "CursorPaginator",
    "PageFetcher",
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
