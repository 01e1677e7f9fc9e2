"""Authentication helpers."""

from .token import AppTokenProvider, StaticTokenProvider, TokenProvider

__all__ = ["AppTokenProvider", "StaticTokenProvider", "TokenProvider"]
