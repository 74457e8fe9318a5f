"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "copilot-kit.yaml"
DEFAULT_README_FILENAME: str = "README.md"
DEFAULT_TEMPLATES_DIRNAME: str = ".github"
DEFAULT_MIN_ALIGNMENT_WIDTH: int = 30

README_TEMP_PREFIX: str = ".README-"
README_TEMP_SUFFIX: str = ".md.tmp"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {"short_descriptions", "min_alignment_width", "readme_filename", "templates_dir"}
)
