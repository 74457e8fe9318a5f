"""Shared exception hierarchy for the README generator."""

from __future__ import annotations

from .base import KitError
from .config import ConfigError
from .structure import StructureError

__all__ = [
    "ConfigError",
    "KitError",
    "StructureError",
]
