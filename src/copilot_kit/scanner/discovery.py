"""Template-pack discovery: directories, markdown files and file entries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from copilot_kit.constants.discovery import HIDDEN_PREFIX, MARKDOWN_SUFFIX
from copilot_kit.exceptions import StructureError
from copilot_kit.model import FileEntry
from copilot_kit.resolve import resolve_document, resolve_short_description

logger = logging.getLogger(__name__)


def list_template_dirs(root: Path) -> list[str]:
    """Return non-hidden subdirectory names of *root*, sorted."""
    try:
        children = list(root.iterdir())
    except OSError as exc:
        raise StructureError(f"Cannot list template directory {root}: {exc}") from exc
    return sorted(child.name for child in children if child.is_dir() and not child.name.startswith(HIDDEN_PREFIX))


def list_markdown_files(directory: Path, suffix: str = MARKDOWN_SUFFIX) -> list[str]:
    """Return names of files in *directory* ending with *suffix*, sorted."""
    try:
        children = list(directory.iterdir())
    except OSError as exc:
        raise StructureError(f"Cannot list template directory {directory}: {exc}") from exc
    return sorted(child.name for child in children if child.name.endswith(suffix) and child.is_file())


def build_file_entry(directory: Path, filename: str, short_descriptions: Mapping[str, str]) -> FileEntry:
    """Resolve the title and descriptions of one template file."""
    path = directory / filename
    title, description = resolve_document(path)
    short = resolve_short_description(filename, title.value, short_descriptions)
    return FileEntry(
        directory=directory.name,
        filename=filename,
        title=title.value,
        description=description.value,
        short_description=short.value,
        path=path,
    )


def collect_entries(root: Path, short_descriptions: Mapping[str, str]) -> tuple[FileEntry, ...]:
    """Scan every template directory under *root* into file entries.

    Order is directory name then filename, both lexicographic.
    """
    entries: list[FileEntry] = []
    for dirname in list_template_dirs(root):
        directory = root / dirname
        for filename in list_markdown_files(directory):
            entries.append(build_file_entry(directory, filename, short_descriptions))
    logger.debug("Collected %d template files under %s", len(entries), root)
    return tuple(entries)
