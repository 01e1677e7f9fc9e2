"""Group listing API.

Listings are cursor paginated. Each listing comes in two forms:

- ``list_*`` fetches one page; pass ``None`` as cursor first, then the
  ``next_cursor`` of the previous page until it is ``None``::

      page = await client.groups.list_groups(20)
      while True:
          handle(page.items)
          if page.is_last:
              break
          page = await client.groups.list_groups(20, page.next_cursor)

- ``list_all_*`` returns an async iterator that keeps requesting pages
  until the listing is exhausted::

      async for group in client.groups.list_all_groups(20):
          handle(group)

A larger ``limit`` means fewer round trips, a smaller one lower latency per
page. 20 is a reasonable start.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from ..core.exceptions import InvalidArgumentError
from ..models import Cursor, Group, GroupMember, Page
from ..runtime.pagination import CursorPaginator
from ..runtime.rest import RestRunner
from .adapters import GroupListAdapter, GroupMemberListAdapter, JoinedGroupsAdapter
from .endpoints import groups_user_joined_spec, list_group_members_spec, list_groups_spec


def _require(name: str, value: str) -> str:
    if not value:
        raise InvalidArgumentError(f"{name} must not be empty")
    return value


class GroupApi:
    """Paginated group and member listings."""

    def __init__(
        self, runner: RestRunner, *, app_key: str | None = None, default_page_size: int = 20
    ) -> None:
        self._runner = runner
        self._app_key = app_key
        self._default_page_size = default_page_size
        self._groups = CursorPaginator[Group](
            self._runner.page_fetcher(
                spec=list_groups_spec(), adapter=GroupListAdapter(), params=self._params()
            ),
            name="list_groups",
        )

    def _params(self, **extra: Any) -> dict[str, Any]:
        return {"app_key": self._app_key, **extra}

    def _members(self, group_id: str) -> CursorPaginator[GroupMember]:
        return CursorPaginator[GroupMember](
            self._runner.page_fetcher(
                spec=list_group_members_spec(),
                adapter=GroupMemberListAdapter(),
                params=self._params(group_id=_require("group_id", group_id)),
            ),
            name="list_group_members",
        )

    async def list_groups(self, limit: int, cursor: Cursor | None = None) -> Page[Group]:
        """Fetch one page of groups.

        Args:
            limit: Maximum groups in the page
            cursor: None on the first call, then the previous page's next_cursor
        """
        return await self._groups.next(limit, cursor)

    def list_all_groups(self, limit: int | None = None) -> AsyncIterator[Group]:
        """Iterate over every group, requesting ``limit`` groups per page."""
        return self._groups.all(self._default_page_size if limit is None else limit)

    async def list_group_members(
        self, group_id: str, limit: int, cursor: Cursor | None = None
    ) -> Page[GroupMember]:
        """Fetch one page of a group's members."""
        return await self._members(group_id).next(limit, cursor)

    def list_all_group_members(
        self, group_id: str, limit: int | None = None
    ) -> AsyncIterator[GroupMember]:
        """Iterate over every member of a group."""
        return self._members(group_id).all(self._default_page_size if limit is None else limit)

    async def list_groups_user_joined(self, username: str) -> list[Group]:
        """List the groups a user belongs to (single request, not paginated)."""
        return await self._runner.run(
            spec=groups_user_joined_spec(),
            adapter=JoinedGroupsAdapter(),
            params=self._params(username=_require("username", username)),
        )
