"""Tests for line-based frontmatter extraction."""

from __future__ import annotations

import pytest

from copilot_kit.parsers import extract_description, extract_title, first_heading, split_frontmatter


def test_split_frontmatter_separates_block_and_body() -> None:
    parsed = split_frontmatter("---\ntitle: X\n---\n# Heading\nbody\n")

    assert parsed.present
    assert parsed.lines == ("title: X",)
    assert parsed.body_lines == ("# Heading", "body")


def test_split_frontmatter_without_block_is_all_body() -> None:
    parsed = split_frontmatter("# Heading\n---\nnot frontmatter\n---\n")

    assert not parsed.present
    assert parsed.lines == ()
    assert parsed.body_lines[0] == "# Heading"


def test_split_frontmatter_unterminated_block_is_all_body() -> None:
    parsed = split_frontmatter("---\ntitle: Never closed\n# Heading\n")

    assert not parsed.present
    assert extract_title(parsed) is None
    assert first_heading(parsed.body_lines) == "Heading"


def test_split_frontmatter_ignores_bom_and_crlf() -> None:
    parsed = split_frontmatter("\ufeff---\r\ntitle: 'Quoted'\r\n---\r\n# Body\r\n")

    assert parsed.present
    assert extract_title(parsed) == "Quoted"
    assert parsed.body_lines == ("# Body",)


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        pytest.param('title: "Code Review"', "Code Review", id="double-quoted"),
        pytest.param("title: 'Code Review'", "Code Review", id="single-quoted"),
        pytest.param("title:    Code Review  ", "Code Review", id="bare"),
        pytest.param('title: "It\'s done"', "It's done", id="inner-quote-kept"),
    ],
)
def test_extract_title_strips_surrounding_quotes(line: str, expected: str) -> None:
    parsed = split_frontmatter(f"---\nmode: agent\n{line}\n---\n")

    assert extract_title(parsed) == expected


def test_extract_title_ignores_nested_and_empty_keys() -> None:
    parsed = split_frontmatter("---\nmeta:\n  title: Nested\nsubtitle: Nope\ntitle:\n---\n")

    assert extract_title(parsed) is None


def test_extract_description_single_line_prefers_first_match() -> None:
    parsed = split_frontmatter("---\ndescription: 'First one'\ndescription: Second\n---\n")

    assert extract_description(parsed) == "First one"


def test_extract_description_block_scalar_joins_lines() -> None:
    text = "\n".join(
        [
            "---",
            "description: |",
            "  Helps you write",
            "  clear commit messages.  ",
            "mode: agent",
            "---",
            "# Commit",
        ]
    )

    assert extract_description(split_frontmatter(text)) == "Helps you write clear commit messages."


def test_extract_description_block_scalar_runs_to_end_of_frontmatter() -> None:
    text = "---\ndescription: |\n  Only line\n---\n"

    assert extract_description(split_frontmatter(text)) == "Only line"


def test_extract_description_block_scalar_stops_at_unindented_line() -> None:
    text = "---\ndescription: |\n  kept\nnot indented\n  dropped\n---\n"

    assert extract_description(split_frontmatter(text)) == "kept"


def test_extract_description_absent_is_none() -> None:
    assert extract_description(split_frontmatter("---\ntitle: X\n---\n")) is None
    assert extract_description(split_frontmatter("description: outside\n")) is None


def test_first_heading_requires_single_hash_and_space() -> None:
    lines = ("## Second level", "#NoSpace", "# Real  ", "# Later")

    assert first_heading(lines) == "Real"
