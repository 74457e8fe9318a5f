"""Immutable records passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from copilot_kit.types import ResolutionSource, WriteStatus


T = TypeVar("T")


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """A resolved value plus where it came from.

    ``error`` is set when a local failure was recovered by substituting a
    deterministic default; the value is still usable.
    """

    value: T
    source: ResolutionSource
    error: str | None = None

    @property
    def recovered(self) -> bool:
        """Whether the value is a default substituted after a failure."""
        return self.error is not None


@dataclass(frozen=True)
class Frontmatter:
    """Leading ``---`` block split from a markdown document."""

    lines: tuple[str, ...]
    body_lines: tuple[str, ...]
    present: bool


@dataclass(frozen=True)
class FileEntry:
    """One markdown file shown in the structure tree."""

    directory: str
    filename: str
    title: str
    description: str | None
    short_description: str | None
    path: Path


@dataclass(frozen=True)
class SectionCounts:
    """Number of template files found per section."""

    instructions: int
    prompts: int
    chatmodes: int


@dataclass(frozen=True)
class GenerationResult:
    """Fully assembled README plus the data it was built from."""

    content: str
    counts: SectionCounts
    entries: tuple[FileEntry, ...]


@dataclass(frozen=True)
class WriteOutcome:
    """Result of the write-if-changed step."""

    path: Path
    status: WriteStatus

    @property
    def changed(self) -> bool:
        return self.status in {"created", "updated"}
