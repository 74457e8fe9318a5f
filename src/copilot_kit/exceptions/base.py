"""Base exception for the README generator."""

from __future__ import annotations


class KitError(Exception):
    """Base class for all generator errors."""
