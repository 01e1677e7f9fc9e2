"""Data models.

Architecture:
    Pydantic v2 models, all frozen (immutable) once parsed from a response.

Model Categories:
    - Pagination: Cursor, PageRequest, Page
    - Groups: Group, GroupMember, MemberRole
"""

from .group import Group, GroupMember, MemberRole
from .page import Cursor, Page, PageRequest

__all__ = [
    "Cursor",
    "Group",
    "GroupMember",
    "MemberRole",
    "Page",
    "PageRequest",
]
