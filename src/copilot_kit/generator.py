"""README generation pipeline: scan, render, assemble, write."""

from __future__ import annotations

import logging
from pathlib import Path

from copilot_kit.config import KitConfig
from copilot_kit.constants.discovery import CHATMODES_DIRNAME, INSTRUCTIONS_DIRNAME, PROMPTS_DIRNAME
from copilot_kit.io import write_if_changed
from copilot_kit.model import GenerationResult, SectionCounts, WriteOutcome
from copilot_kit.render import (
    assemble_document,
    chatmodes_section,
    instructions_section,
    prompts_section,
    render_header,
    render_structure,
)
from copilot_kit.scanner import collect_entries, list_template_dirs

logger = logging.getLogger(__name__)


def generate_readme(repo_root: Path, config: KitConfig | None = None) -> GenerationResult:
    """Build the README content for the template pack under *repo_root*.

    Raises :class:`StructureError` when the template root, or its
    ``instructions``/``prompts`` directories, cannot be listed.
    """
    config = config or KitConfig()
    templates_root = config.templates_root(repo_root)
    logger.info("Repository root: %s", repo_root)
    logger.info("Instructions directory: %s", templates_root / INSTRUCTIONS_DIRNAME)
    logger.info("Prompts directory: %s", templates_root / PROMPTS_DIRNAME)
    logger.info("Chat modes directory: %s", templates_root / CHATMODES_DIRNAME)

    directories = list_template_dirs(templates_root)
    entries = collect_entries(templates_root, config.short_descriptions)
    structure = render_structure(
        config.templates_dir,
        directories,
        entries,
        min_width=config.min_alignment_width,
    )

    instructions, instruction_count = instructions_section(templates_root / INSTRUCTIONS_DIRNAME)
    prompts, prompt_count = prompts_section(templates_root / PROMPTS_DIRNAME)
    chatmodes, chatmode_count = chatmodes_section(templates_root / CHATMODES_DIRNAME)

    content = assemble_document(render_header(structure), [instructions, prompts, chatmodes])
    return GenerationResult(
        content=content,
        counts=SectionCounts(
            instructions=instruction_count,
            prompts=prompt_count,
            chatmodes=chatmode_count,
        ),
        entries=entries,
    )


def update_readme(repo_root: Path, config: KitConfig | None = None, *, check: bool = False) -> WriteOutcome:
    """Regenerate the README and write it only if its content changed."""
    config = config or KitConfig()
    readme_path = config.readme_path(repo_root)
    logger.info("Writing README to: %s", readme_path)
    result = generate_readme(repo_root, config)
    return write_if_changed(readme_path, result.content, check=check)
