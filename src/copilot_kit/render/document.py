"""README assembly from static sections and the rendered structure."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from copilot_kit.constants.discovery import CHATMODE_SUFFIX, MARKDOWN_SUFFIX, PROMPT_SUFFIX
from copilot_kit.constants.templates import (
    CHATMODES_SECTION,
    CHATMODES_USAGE,
    CODE_FENCE,
    FOOTER,
    HEADER,
    INSTRUCTIONS_SECTION,
    INSTRUCTIONS_USAGE,
    PROMPTS_SECTION,
    PROMPTS_USAGE,
    SECTION_SEPARATOR,
    STRUCTURE_PLACEHOLDER,
)
from copilot_kit.scanner import list_markdown_files

logger = logging.getLogger(__name__)


def render_header(structure: str) -> str:
    """Substitute the fenced structure block into the header template."""
    return HEADER.replace(STRUCTURE_PLACEHOLDER, f"{CODE_FENCE}\n{structure}\n{CODE_FENCE}", 1)


def instructions_section(directory: Path) -> tuple[str, int]:
    """Instructions section text and the number of instruction files found.

    Raises :class:`StructureError` when *directory* cannot be listed.
    """
    count = len(list_markdown_files(directory, MARKDOWN_SUFFIX))
    logger.info("Found %d instruction files", count)
    return f"{INSTRUCTIONS_SECTION}{SECTION_SEPARATOR}{INSTRUCTIONS_USAGE}", count


def prompts_section(directory: Path) -> tuple[str, int]:
    """Prompts section text and the number of prompt files found.

    Raises :class:`StructureError` when *directory* cannot be listed.
    """
    count = len(list_markdown_files(directory, PROMPT_SUFFIX))
    logger.info("Found %d prompt files", count)
    return f"{PROMPTS_SECTION}{SECTION_SEPARATOR}{PROMPTS_USAGE}", count


def chatmodes_section(directory: Path) -> tuple[str | None, int]:
    """Chat modes section text, or ``None`` when there are no chat modes."""
    if not directory.exists():
        logger.info("Chat modes directory does not exist")
        return None, 0

    count = len(list_markdown_files(directory, CHATMODE_SUFFIX))
    logger.info("Found %d chat mode files", count)
    if count == 0:
        return None, 0
    return f"{CHATMODES_SECTION}{SECTION_SEPARATOR}{CHATMODES_USAGE}", count


def assemble_document(header: str, sections: Sequence[str | None], footer: str = FOOTER) -> str:
    """Join header, present sections and footer with blank-line separators."""
    parts = [header, *(section for section in sections if section), footer]
    return SECTION_SEPARATOR.join(parts)
