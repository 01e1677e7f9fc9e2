"""Custom exception hierarchy."""

from __future__ import annotations


class IMError(Exception):
    """Base exception for all library errors."""

    pass


class IMConfigError(IMError):
    """Client configuration is missing or invalid."""

    pass


class InvalidArgumentError(IMError):
    """Argument rejected locally, before any request is sent."""

    pass


class FetchFailedError(IMError):
    """A page fetch failed.

    Wraps whatever the underlying fetcher raised. The original exception is
    kept as ``__cause__``; the paginator does not classify it further.
    """

    def __init__(self, message: str, page_index: int | None = None) -> None:
        super().__init__(message)
        self.page_index = page_index


class ProtocolViolationError(FetchFailedError):
    """Server response is malformed or internally inconsistent."""

    pass


class ProviderError(FetchFailedError):
    """Error response from the IM server."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error


class AuthenticationError(ProviderError):
    """Credentials were rejected or no token could be obtained."""

    pass


class NotFoundError(ProviderError):
    """Requested resource does not exist."""

    def __init__(self, message: str, error: str | None = None) -> None:
        super().__init__(message, status_code=404, error=error)


class RateLimitError(ProviderError):
    """Server rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60, error: str | None = None) -> None:
        super().__init__(message, status_code=429, error=error)
        self.retry_after = retry_after
