"""Shared file I/O helpers."""

from .files import write_if_changed, write_text_atomic

__all__ = ["write_if_changed", "write_text_atomic"]
