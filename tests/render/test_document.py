"""Tests for README assembly and section generation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from copilot_kit.constants.templates import (
    CHATMODES_HEADING,
    FOOTER,
    HEADER,
    INSTRUCTIONS_HEADING,
    PROMPTS_HEADING,
    STRUCTURE_PLACEHOLDER,
)
from copilot_kit.exceptions import StructureError
from copilot_kit.render import (
    assemble_document,
    chatmodes_section,
    instructions_section,
    prompts_section,
    render_header,
)


def test_render_header_fences_structure_in_place_of_placeholder() -> None:
    header = render_header(".github/\n└── prompts/")

    assert STRUCTURE_PLACEHOLDER not in header
    assert header.endswith("## Repository Structure\n\n```\n.github/\n└── prompts/\n```")


def test_assemble_document_skips_missing_sections() -> None:
    document = assemble_document("HEADER", ["one", None, "two"], footer="FOOTER")

    assert document == "HEADER\n\none\n\ntwo\n\nFOOTER"


def test_assemble_document_defaults_to_static_footer() -> None:
    assert assemble_document(HEADER, []).endswith(FOOTER)


def test_instructions_section_counts_all_markdown(tmp_path: Path) -> None:
    (tmp_path / "a.instructions.md").write_text("", encoding="utf-8")
    (tmp_path / "notes.md").write_text("", encoding="utf-8")
    (tmp_path / "skip.txt").write_text("", encoding="utf-8")

    text, count = instructions_section(tmp_path)

    assert count == 2
    assert text.startswith(INSTRUCTIONS_HEADING)
    assert "**Usage**" in text


def test_prompts_section_counts_only_prompt_files(tmp_path: Path) -> None:
    (tmp_path / "a.prompt.md").write_text("", encoding="utf-8")
    (tmp_path / "notes.md").write_text("", encoding="utf-8")

    text, count = prompts_section(tmp_path)

    assert count == 1
    assert text.startswith(PROMPTS_HEADING)


@pytest.mark.parametrize("section", [instructions_section, prompts_section])
def test_required_sections_fail_on_missing_directory(
    tmp_path: Path, section: Callable[[Path], tuple[str, int]]
) -> None:
    with pytest.raises(StructureError):
        section(tmp_path / "missing")


def test_chatmodes_section_absent_without_directory(tmp_path: Path) -> None:
    assert chatmodes_section(tmp_path / "chatmodes") == (None, 0)


def test_chatmodes_section_absent_without_chatmode_files(tmp_path: Path) -> None:
    (tmp_path / "notes.md").write_text("", encoding="utf-8")

    assert chatmodes_section(tmp_path) == (None, 0)


def test_chatmodes_section_present_with_files(tmp_path: Path) -> None:
    (tmp_path / "debug.chatmode.md").write_text("", encoding="utf-8")

    text, count = chatmodes_section(tmp_path)

    assert count == 1
    assert text is not None
    assert text.startswith(CHATMODES_HEADING)
