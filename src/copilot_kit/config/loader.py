"""Config loading and normalization for README generation."""

from __future__ import annotations

import difflib
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from copilot_kit.config.model import KitConfig
from copilot_kit.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_MIN_ALIGNMENT_WIDTH,
    DEFAULT_README_FILENAME,
    DEFAULT_TEMPLATES_DIRNAME,
)
from copilot_kit.constants.descriptions import DEFAULT_SHORT_DESCRIPTIONS
from copilot_kit.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> KitConfig:
    """Load and validate generator config from ``copilot-kit.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return KitConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(_unknown_key_message(unknown[0]))

    min_alignment_width = raw.get("min_alignment_width", DEFAULT_MIN_ALIGNMENT_WIDTH)
    if (
        isinstance(min_alignment_width, bool)
        or not isinstance(min_alignment_width, int)
        or min_alignment_width <= 0
    ):
        raise ConfigError("min_alignment_width must be a positive integer")

    return KitConfig(
        short_descriptions=_merge_short_descriptions(raw.get("short_descriptions")),
        min_alignment_width=min_alignment_width,
        readme_filename=_ensure_filename(raw.get("readme_filename", DEFAULT_README_FILENAME), "readme_filename"),
        templates_dir=_ensure_filename(raw.get("templates_dir", DEFAULT_TEMPLATES_DIRNAME), "templates_dir"),
    )


def _merge_short_descriptions(value: Any) -> MappingProxyType[str, str]:
    """Overlay configured short descriptions on the bundled defaults."""
    if value is None:
        return DEFAULT_SHORT_DESCRIPTIONS
    if not isinstance(value, dict):
        raise ConfigError("short_descriptions must be a mapping of filename to description")

    merged = dict(DEFAULT_SHORT_DESCRIPTIONS)
    for filename, description in value.items():
        if not isinstance(filename, str) or not filename.strip():
            raise ConfigError("short_descriptions keys must be non-empty filenames")
        if not isinstance(description, str) or not description.strip():
            raise ConfigError(f"short_descriptions.{filename} must be a non-empty string")
        merged[filename.strip()] = description.strip()
    return MappingProxyType(merged)


def _ensure_filename(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value.strip()


def _unknown_key_message(key: str) -> str:
    message = f"Unknown config key: {key}"
    suggestion = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1)
    if suggestion:
        message = f"{message} (did you mean {suggestion[0]!r}?)"
    return message
