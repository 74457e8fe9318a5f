"""Filename normalization helpers for display titles."""

from __future__ import annotations

from pathlib import PurePath

from copilot_kit.constants.discovery import RECOGNIZED_SUFFIXES
from copilot_kit.constants.parsing import FILENAME_SEPARATOR_PATTERN, WORD_START_PATTERN


def humanize_name(raw_name: str) -> str:
    """Replace ``-``/``_`` with spaces and capitalize the first letter of each word."""
    spaced = FILENAME_SEPARATOR_PATTERN.sub(" ", raw_name)
    return WORD_START_PATTERN.sub(lambda match: match.group(0).upper(), spaced)


def recognized_suffix(filename: str) -> str | None:
    """Return the template suffix *filename* ends with, if any."""
    for suffix in RECOGNIZED_SUFFIXES:
        if filename.endswith(suffix):
            return suffix
    return None


def title_from_filename(filename: str) -> str:
    """Derive a display title from a filename.

    Recognized template suffixes (``.prompt.md`` and friends) are stripped
    whole; any other file loses only its final extension.
    """
    suffix = recognized_suffix(filename)
    stem = filename.removesuffix(suffix) if suffix else PurePath(filename).stem
    return humanize_name(stem)
