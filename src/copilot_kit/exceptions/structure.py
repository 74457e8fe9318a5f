"""Template-pack structure exceptions."""

from __future__ import annotations

from copilot_kit.exceptions.base import KitError


class StructureError(KitError, OSError):
    """Raised when a required template directory is missing or unreadable."""
