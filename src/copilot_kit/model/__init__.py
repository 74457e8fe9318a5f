"""Core data models for the README generator."""

from .entities import (
    FileEntry,
    Frontmatter,
    GenerationResult,
    Resolved,
    SectionCounts,
    WriteOutcome,
)

__all__ = [
    "FileEntry",
    "Frontmatter",
    "GenerationResult",
    "Resolved",
    "SectionCounts",
    "WriteOutcome",
]
