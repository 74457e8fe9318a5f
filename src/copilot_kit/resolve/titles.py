"""Title resolution for template files.

Titles are resolved by trying an ordered chain of resolvers; the first one
that yields a value wins. Read failures never propagate: the filename-derived
title is returned instead, with the error recorded on the result.
"""

from __future__ import annotations

from typing import TypeAlias
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from copilot_kit.model import Frontmatter, Resolved
from copilot_kit.parsers import extract_title, first_heading, split_frontmatter
from copilot_kit.types import ResolutionSource
from copilot_kit.utils import recognized_suffix, title_from_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TitleContext:
    """Everything a title resolver may look at."""

    filename: str
    lines: tuple[str, ...]
    frontmatter: Frontmatter

    @property
    def is_template(self) -> bool:
        """Whether the file carries one of the recognized template suffixes."""
        return recognized_suffix(self.filename) is not None


TitleResolver: TypeAlias = Callable[[TitleContext], str | None]


def _frontmatter_title(context: TitleContext) -> str | None:
    return extract_title(context.frontmatter)


def _template_heading(context: TitleContext) -> str | None:
    if not context.is_template:
        return None
    return first_heading(context.frontmatter.body_lines)


def _template_filename(context: TitleContext) -> str | None:
    if not context.is_template:
        return None
    return title_from_filename(context.filename)


def _any_heading(context: TitleContext) -> str | None:
    return first_heading(context.lines)


def _filename(context: TitleContext) -> str | None:
    return title_from_filename(context.filename)


TITLE_RESOLVERS: tuple[tuple[ResolutionSource, TitleResolver], ...] = (
    ("frontmatter", _frontmatter_title),
    ("heading", _template_heading),
    ("filename", _template_filename),
    ("heading", _any_heading),
    ("filename", _filename),
)


def resolve_title_from_text(filename: str, text: str) -> Resolved[str]:
    """Resolve the display title of *filename* given its contents."""
    frontmatter = split_frontmatter(text)
    context = TitleContext(
        filename=filename,
        lines=tuple(text.lstrip("\ufeff").splitlines()),
        frontmatter=frontmatter,
    )
    for source, resolver in TITLE_RESOLVERS:
        value = resolver(context)
        if value:
            return Resolved(value=value, source=source)
    return Resolved(value=title_from_filename(filename), source="filename")


def resolve_title(path: Path) -> Resolved[str]:
    """Resolve the display title of the markdown file at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error processing file %s: %s", path, exc)
        return Resolved(value=title_from_filename(path.name), source="default", error=str(exc))

    resolved = resolve_title_from_text(path.name, text)
    logger.debug("Resolved title for %s from %s: %s", path.name, resolved.source, resolved.value)
    return resolved
