"""Core components."""

from .config import ClientConfig
from .exceptions import (
    AuthenticationError,
    FetchFailedError,
    IMConfigError,
    IMError,
    InvalidArgumentError,
    NotFoundError,
    ProtocolViolationError,
    ProviderError,
    RateLimitError,
)

__all__ = [
    "ClientConfig",
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
