"""Config data model for README generation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from copilot_kit.constants.config import (
    DEFAULT_MIN_ALIGNMENT_WIDTH,
    DEFAULT_README_FILENAME,
    DEFAULT_TEMPLATES_DIRNAME,
)
from copilot_kit.constants.descriptions import DEFAULT_SHORT_DESCRIPTIONS


@dataclass(frozen=True)
class KitConfig:
    """Resolved generator config."""

    short_descriptions: Mapping[str, str] = field(default_factory=lambda: DEFAULT_SHORT_DESCRIPTIONS)
    min_alignment_width: int = DEFAULT_MIN_ALIGNMENT_WIDTH
    readme_filename: str = DEFAULT_README_FILENAME
    templates_dir: str = DEFAULT_TEMPLATES_DIRNAME

    def templates_root(self, repo_root: Path) -> Path:
        """Directory holding the template subdirectories."""
        return repo_root / self.templates_dir

    def readme_path(self, repo_root: Path) -> Path:
        """README written by the generator."""
        return repo_root / self.readme_filename
