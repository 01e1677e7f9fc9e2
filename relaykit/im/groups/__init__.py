"""Chat group listings."""

from .api import GroupApi

__all__ = ["GroupApi"]
