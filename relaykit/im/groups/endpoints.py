"""Group REST endpoint specs."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..runtime.rest import RestEndpointSpec


def _paged_query(params: dict[str, Any]) -> dict[str, Any]:
    q: dict[str, Any] = {"limit": int(params["limit"])}
    if params.get("cursor") is not None:
        q["cursor"] = params["cursor"]
    return q


def list_groups_spec() -> RestEndpointSpec:
    return RestEndpointSpec(
        id="list_groups",
        method="GET",
        build_path=lambda _: "/chatgroups",
        build_query=_paged_query,
    )


def list_group_members_spec() -> RestEndpointSpec:
    def build_path(params: dict[str, Any]) -> str:
        return f"/chatgroups/{quote(params['group_id'], safe='')}/users"

    return RestEndpointSpec(
        id="list_group_members",
        method="GET",
        build_path=build_path,
        build_query=_paged_query,
    )


def groups_user_joined_spec() -> RestEndpointSpec:
    def build_path(params: dict[str, Any]) -> str:
        return f"/users/{quote(params['username'], safe='')}/joined_chatgroups"

    return RestEndpointSpec(
        id="groups_user_joined",
        method="GET",
        build_path=build_path,
    )
