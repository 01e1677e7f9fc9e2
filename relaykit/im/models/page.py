"""Cursor pagination models.

A page is one batch of items plus the cursor that resumes the listing. The
cursor is an opaque server token: nothing in this library inspects it, and
the only meaningful test is whether it is ``None`` (no further pages).
"""

from __future__ import annotations

from typing import Any, Generic, NewType, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.exceptions import InvalidArgumentError

Cursor = NewType("Cursor", str)

T = TypeVar("T")


class PageRequest(BaseModel):
    """Parameters for a single page fetch."""

    limit: int
    cursor: Cursor | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def validate_request(cls, data: Any) -> Any:
        """Reject non-positive limits and non-string cursors with InvalidArgumentError.

        Raised before pydantic's own validation so callers get the library
        exception instead of a pydantic ``ValidationError``.
        """
        if isinstance(data, dict):
            limit = data.get("limit")
            if isinstance(limit, bool) or not isinstance(limit, int):
                raise InvalidArgumentError(f"limit must be an integer, got {limit!r}")
            if limit <= 0:
                raise InvalidArgumentError(f"limit must be positive, got {limit}")
            cursor = data.get("cursor")
            if cursor is not None and not isinstance(cursor, str):
                raise InvalidArgumentError(
                    f"cursor must be a string or None, got {type(cursor).__name__}"
                )
        return data


class Page(BaseModel, Generic[T]):
    """One batch of listed items and the cursor of the next batch.

    An empty ``items`` list with a cursor is a normal page; only a ``None``
    cursor marks the end of the listing.
    """

    items: list[T] = Field(default_factory=list)
    next_cursor: Cursor | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def is_last(self) -> bool:
        """True if no further pages follow this one."""
        return self.next_cursor is None

    @classmethod
    def terminal(cls, items: list[T]) -> Page[T]:
        """Build the last page of a listing."""
        return cls(items=items, next_cursor=None)
