"""Configuration loading for README generation."""

from __future__ import annotations

from copilot_kit.config.loader import load_config
from copilot_kit.config.model import KitConfig

__all__ = [
    "KitConfig",
    "load_config",
]
