"""Single-read resolution of a template file's title and description."""

from __future__ import annotations

import logging
from pathlib import Path

from copilot_kit.model import Resolved
from copilot_kit.resolve.descriptions import resolve_description_from_text
from copilot_kit.resolve.titles import resolve_title_from_text
from copilot_kit.utils import title_from_filename

logger = logging.getLogger(__name__)


def resolve_document(path: Path) -> tuple[Resolved[str], Resolved[str | None]]:
    """Resolve title and frontmatter description of *path* from one read.

    A read failure is logged once and both values fall back to their defaults.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error processing file %s: %s", path, exc)
        return (
            Resolved(value=title_from_filename(path.name), source="default", error=str(exc)),
            Resolved(value=None, source="default", error=str(exc)),
        )

    title = resolve_title_from_text(path.name, text)
    logger.debug("Resolved title for %s from %s: %s", path.name, title.source, title.value)
    return title, resolve_description_from_text(text)
