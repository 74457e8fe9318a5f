"""Shared pytest fixtures for building template packs on disk."""

from __future__ import annotations

from typing import TypeAlias
from collections.abc import Callable
from pathlib import Path

import pytest

PackBuilder: TypeAlias = Callable[[dict[str, str]], Path]


@pytest.fixture()
def make_pack(tmp_path: Path) -> PackBuilder:
    """Return a factory that writes ``{"dir/file.md": text}`` under ``<repo>/.github``.

    The factory returns the repository root.
    """

    def _build(files: dict[str, str]) -> Path:
        templates_root = tmp_path / ".github"
        templates_root.mkdir(exist_ok=True)
        for relative, text in files.items():
            path = templates_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _build


@pytest.fixture()
def basic_repo_root(make_pack: PackBuilder) -> Path:
    """Repository with one instruction file and one prompt file, no chat modes."""
    return make_pack(
        {
            "instructions/a.instructions.md": '---\ntitle: "Alpha"\n---\n# Ignored heading\n',
            "prompts/b.prompt.md": "# Beta Prompt\n\nDo the thing.\n",
        }
    )
