"""Configuration-related exceptions."""

from __future__ import annotations

from copilot_kit.exceptions.base import KitError


class ConfigError(KitError, ValueError):
    """Raised when ``copilot-kit.yaml`` is invalid."""
