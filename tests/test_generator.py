"""End-to-end tests for README generation."""

from __future__ import annotations

from typing import TypeAlias
from collections.abc import Callable
from pathlib import Path

import pytest

from copilot_kit.config import KitConfig
from copilot_kit.constants.templates import CHATMODES_HEADING, INSTRUCTIONS_HEADING, PROMPTS_HEADING
from copilot_kit.exceptions import StructureError
from copilot_kit.generator import generate_readme, update_readme

PackBuilder: TypeAlias = Callable[[dict[str, str]], Path]


def _structure_block(content: str) -> list[str]:
    start = content.index("```\n.github/") + len("```\n")
    end = content.index("\n```", start)
    return content[start:end].splitlines()


def test_generate_readme_lists_files_under_their_directories(basic_repo_root: Path) -> None:
    result = generate_readme(basic_repo_root)

    assert _structure_block(result.content) == [
        ".github/",
        "├── instructions/",
        "│   └── " + "a.instructions.md".ljust(30) + " # alpha specific standards",
        "└── prompts/",
        "    └── " + "b.prompt.md".ljust(30),
    ]
    assert [entry.title for entry in result.entries] == ["Alpha", "Beta Prompt"]


def test_generate_readme_has_one_of_each_required_section(basic_repo_root: Path) -> None:
    content = generate_readme(basic_repo_root).content

    assert content.count(INSTRUCTIONS_HEADING) == 1
    assert content.count(PROMPTS_HEADING) == 1
    assert CHATMODES_HEADING not in content
    assert content.index(INSTRUCTIONS_HEADING) < content.index(PROMPTS_HEADING)
    assert content.startswith("# Copilot-Kit\n")
    assert content.endswith("see the LICENSE file for details.")


def test_generate_readme_empty_chatmodes_dir_omits_section(basic_repo_root: Path) -> None:
    (basic_repo_root / ".github" / "chatmodes").mkdir()
    (basic_repo_root / ".github" / "chatmodes" / "notes.md").write_text("# Notes\n", encoding="utf-8")

    result = generate_readme(basic_repo_root)

    assert CHATMODES_HEADING not in result.content
    assert result.counts.chatmodes == 0
    assert "├── chatmodes/" in result.content


def test_generate_readme_includes_chatmodes_when_present(make_pack: PackBuilder) -> None:
    repo = make_pack(
        {
            "instructions/a.instructions.md": "# A\n",
            "prompts/b.prompt.md": "# B\n",
            "chatmodes/debug.chatmode.md": "# Debug\n",
            "chatmodes/planner.chatmode.md": '---\ntitle: "Planner"\n---\n',
        }
    )

    result = generate_readme(repo)

    assert result.content.count(CHATMODES_HEADING) == 1
    assert result.content.index(PROMPTS_HEADING) < result.content.index(CHATMODES_HEADING)
    assert (result.counts.instructions, result.counts.prompts, result.counts.chatmodes) == (1, 1, 2)
    structure = _structure_block(result.content)
    assert structure[1] == "├── chatmodes/"
    assert structure[2].endswith(" # Debugging assistance mode")
    assert structure[3].endswith(" # planner mode")
    assert structure[-2] == "└── prompts/"


def test_generate_readme_missing_prompts_directory_is_fatal(make_pack: PackBuilder) -> None:
    repo = make_pack({"instructions/a.instructions.md": "# A\n"})

    with pytest.raises(StructureError):
        generate_readme(repo)


def test_generate_readme_missing_templates_root_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(StructureError):
        generate_readme(tmp_path)


def test_generate_readme_respects_config(basic_repo_root: Path) -> None:
    config = KitConfig(short_descriptions={"b.prompt.md": "Beta things"}, min_alignment_width=12)

    structure = _structure_block(generate_readme(basic_repo_root, config).content)

    assert structure[2] == "│   └── a.instructions.md # alpha specific standards"
    assert structure[4] == "    └── b.prompt.md       # Beta things"


def test_update_readme_is_idempotent(basic_repo_root: Path) -> None:
    first = update_readme(basic_repo_root)
    first_bytes = (basic_repo_root / "README.md").read_bytes()
    second = update_readme(basic_repo_root)

    assert first.status == "created"
    assert second.status == "unchanged"
    assert (basic_repo_root / "README.md").read_bytes() == first_bytes
    assert generate_readme(basic_repo_root).content.encode("utf-8") == first_bytes


def test_update_readme_rewrites_after_template_change(basic_repo_root: Path) -> None:
    update_readme(basic_repo_root)
    (basic_repo_root / ".github" / "prompts" / "clean.prompt.md").write_text("# Clean\n", encoding="utf-8")

    outcome = update_readme(basic_repo_root)

    assert outcome.status == "updated"
    assert "clean.prompt.md" in (basic_repo_root / "README.md").read_text(encoding="utf-8")


def test_update_readme_check_mode_never_writes(basic_repo_root: Path) -> None:
    outcome = update_readme(basic_repo_root, check=True)

    assert outcome.status == "stale"
    assert not (basic_repo_root / "README.md").exists()
