"""Line-based extraction of ``title`` and ``description`` from markdown frontmatter.

Only the handful of shapes the template pack actually uses are understood:
a quoted or bare ``title:``, a single-line ``description:`` and a literal
block-scalar ``description: |`` with two-space indented continuation lines.
Anything else in the frontmatter is ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from copilot_kit.constants.parsing import (
    BLOCK_DESCRIPTION_PATTERN,
    BLOCK_SCALAR_INDENT,
    FRONTMATTER_DELIMITER,
    FRONTMATTER_KEY_PATTERN,
    HEADING_PREFIX,
    INLINE_DESCRIPTION_PATTERN,
    SURROUNDING_QUOTES_PATTERN,
    TITLE_KEY,
)
from copilot_kit.model import Frontmatter


def split_frontmatter(text: str) -> Frontmatter:
    """Split *text* into its leading ``---`` block and the body after it.

    A document without a complete leading block is treated as all body.
    """
    lines = tuple(text.lstrip("\ufeff").splitlines())
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return Frontmatter(lines=(), body_lines=lines, present=False)

    for index in range(1, len(lines)):
        if lines[index].strip() == FRONTMATTER_DELIMITER:
            return Frontmatter(lines=lines[1:index], body_lines=lines[index + 1 :], present=True)

    return Frontmatter(lines=(), body_lines=lines, present=False)


def extract_title(frontmatter: Frontmatter) -> str | None:
    """Return the frontmatter ``title`` with surrounding quotes removed."""
    for line in frontmatter.lines:
        if not line.startswith(TITLE_KEY):
            continue
        title = SURROUNDING_QUOTES_PATTERN.sub("", line[len(TITLE_KEY) :].strip())
        return title or None
    return None


def extract_description(frontmatter: Frontmatter) -> str | None:
    """Return the frontmatter ``description``, folding a ``|`` block into one line."""
    collecting = False
    collected: list[str] = []

    for line in frontmatter.lines:
        if BLOCK_DESCRIPTION_PATTERN.match(line):
            collecting = True
            continue

        if collecting:
            if not line.startswith(BLOCK_SCALAR_INDENT) or FRONTMATTER_KEY_PATTERN.match(line):
                return _join_block(collected)
            collected.append(line[len(BLOCK_SCALAR_INDENT) :])
            continue

        match = INLINE_DESCRIPTION_PATTERN.match(line)
        if match:
            return match.group(1)

    if collected:
        return _join_block(collected)
    return None


def first_heading(lines: Sequence[str]) -> str | None:
    """Return the text of the first ``# `` heading in *lines*."""
    for line in lines:
        if line.startswith(HEADING_PREFIX):
            return line[len(HEADING_PREFIX) :].strip()
    return None


def _join_block(collected: list[str]) -> str | None:
    joined = " ".join(collected).strip()
    return joined or None
