"""Rendering of the structure tree and README document."""

from .document import assemble_document, chatmodes_section, instructions_section, prompts_section, render_header
from .structure import alignment_width, render_structure

__all__ = [
    "alignment_width",
    "assemble_document",
    "chatmodes_section",
    "instructions_section",
    "prompts_section",
    "render_header",
    "render_structure",
]
