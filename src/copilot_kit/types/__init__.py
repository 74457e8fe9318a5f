"""Shared type aliases for the README generator."""

from .common import ResolutionSource, WriteStatus

__all__ = [
    "ResolutionSource",
    "WriteStatus",
]
