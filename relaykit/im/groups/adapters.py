"""Response adapters for group REST endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from ..core.exceptions import ProtocolViolationError
from ..models import Cursor, Group, GroupMember, MemberRole, Page
from ..runtime.rest import ResponseAdapter


def _data_rows(response: Any) -> list[dict[str, Any]]:
    if not isinstance(response, dict) or not isinstance(response.get("data"), list):
        raise ProtocolViolationError("Response is missing the 'data' list")
    return response["data"]


def _next_cursor(response: dict[str, Any]) -> Cursor | None:
    # The last page either omits the cursor or sends an empty one
    cursor = response.get("cursor")
    if cursor is None or cursor == "":
        return None
    return Cursor(str(cursor))


def _strip_app_key(username: str | None, app_key: str | None) -> str | None:
    if username and app_key and username.startswith(f"{app_key}_"):
        return username[len(app_key) + 1 :]
    return username


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)


def _parse_group(row: dict[str, Any], app_key: str | None) -> Group:
    try:
        return Group(
            group_id=str(row["groupid"]),
            name=row.get("groupname") or row.get("name"),
            owner=_strip_app_key(row.get("owner"), app_key),
            affiliations=int(row.get("affiliations") or 0),
            last_modified=_parse_timestamp(row.get("last_modified")),
        )
    except (KeyError, TypeError, ValueError, ValidationError) as e:
        raise ProtocolViolationError(f"Malformed group entry {row!r}: {e}") from e


class GroupListAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Page[Group]:
        app_key = params.get("app_key")
        groups = [_parse_group(row, app_key) for row in _data_rows(response)]
        return Page[Group](items=groups, next_cursor=_next_cursor(response))


class GroupMemberListAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Page[GroupMember]:
        members: list[GroupMember] = []
        for row in _data_rows(response):
            # Each entry is a single {role: username} pair
            if not isinstance(row, dict) or len(row) != 1:
                raise ProtocolViolationError(f"Malformed member entry {row!r}")
            role, username = next(iter(row.items()))
            try:
                members.append(GroupMember(username=username, role=MemberRole(role)))
            except (ValueError, ValidationError) as e:
                raise ProtocolViolationError(f"Malformed member entry {row!r}: {e}") from e
        return Page[GroupMember](items=members, next_cursor=_next_cursor(response))


class JoinedGroupsAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[Group]:
        app_key = params.get("app_key")
        return [_parse_group(row, app_key) for row in _data_rows(response)]
