"""Relaykit IM - async client for cursor-paginated IM server listings."""

from .auth import AppTokenProvider, StaticTokenProvider, TokenProvider
from .client import IMClient
from .core import (
    AuthenticationError,
    ClientConfig,
    FetchFailedError,
    IMConfigError,
    IMError,
    InvalidArgumentError,
    NotFoundError,
    ProtocolViolationError,
    ProviderError,
    RateLimitError,
)
from .groups import GroupApi
from .models import Cursor, Group, GroupMember, MemberRole, Page, PageRequest
from .runtime import CursorPaginator, PageFetcher

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Client
    "IMClient",
    "ClientConfig",
    "GroupApi",
    # Pagination
    "CursorPaginator",
    "PageFetcher",
    "Cursor",
    "Page",
    "PageRequest",
    # Models
    "Group",
    "GroupMember",
    "MemberRole",
    # Auth
    "TokenProvider",
    "StaticTokenProvider",
    "AppTokenProvider",
    # Exceptions
    "IMError",
    "IMConfigError",
    "InvalidArgumentError",
    "FetchFailedError",
    "ProtocolViolationError",
    "ProviderError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
]
