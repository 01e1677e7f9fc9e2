"""Chat group models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MemberRole(str, Enum):
    """Role of a user within a group."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"


class Group(BaseModel):
    """Chat group as returned by group listings."""

    group_id: str = Field(..., min_length=1)
    name: str | None = None
    owner: str | None = None
    affiliations: int = Field(default=0, ge=0)
    last_modified: datetime | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class GroupMember(BaseModel):
    """Member entry of a group member listing."""

    username: str = Field(..., min_length=1)
    role: MemberRole = MemberRole.MEMBER

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def is_owner(self) -> bool:
        return self.role == MemberRole.OWNER
