"""Description resolution: frontmatter descriptions and tree short descriptions."""

from __future__ import annotations

from typing import TypeAlias
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType

from copilot_kit.constants.descriptions import CHATMODE_FALLBACK_TEMPLATE, INSTRUCTIONS_FALLBACK_TEMPLATE
from copilot_kit.constants.discovery import CHATMODE_SUFFIX, INSTRUCTIONS_SUFFIX, PROMPT_SUFFIX
from copilot_kit.model import Resolved
from copilot_kit.parsers import extract_description, split_frontmatter
from copilot_kit.utils import recognized_suffix

logger = logging.getLogger(__name__)

CategoryFallback: TypeAlias = Callable[[str], str | None]


def resolve_description_from_text(text: str) -> Resolved[str | None]:
    """Resolve the frontmatter description of a document, if it has one."""
    description = extract_description(split_frontmatter(text))
    if description is None:
        return Resolved(value=None, source="default")
    return Resolved(value=description, source="frontmatter")


def resolve_description(path: Path) -> Resolved[str | None]:
    """Resolve the frontmatter description of the markdown file at *path*."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error processing file %s: %s", path, exc)
        return Resolved(value=None, source="default", error=str(exc))
    return resolve_description_from_text(text)


def _instructions_fallback(title: str) -> str | None:
    return INSTRUCTIONS_FALLBACK_TEMPLATE.format(word=title.split(" ")[-1].lower())


def _prompt_fallback(title: str) -> str | None:
    return None


def _chatmode_fallback(title: str) -> str | None:
    return CHATMODE_FALLBACK_TEMPLATE.format(title=title.lower())


CATEGORY_FALLBACKS: Mapping[str, CategoryFallback] = MappingProxyType(
    {
        INSTRUCTIONS_SUFFIX: _instructions_fallback,
        PROMPT_SUFFIX: _prompt_fallback,
        CHATMODE_SUFFIX: _chatmode_fallback,
    }
)


def resolve_short_description(
    filename: str,
    title: str,
    table: Mapping[str, str],
) -> Resolved[str | None]:
    """Pick the trailing tree comment for *filename*.

    Exact filename matches in *table* win; otherwise the file's category
    decides, and prompts or unrecognized files get no comment.
    """
    known = table.get(filename)
    if known:
        return Resolved(value=known, source="lookup")

    suffix = recognized_suffix(filename)
    fallback = CATEGORY_FALLBACKS.get(suffix) if suffix else None
    value = fallback(title) if fallback else None
    if value is None:
        return Resolved(value=None, source="default")
    return Resolved(value=value, source="category")
