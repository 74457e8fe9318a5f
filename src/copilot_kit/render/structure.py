"""Box-drawing tree of template directories and files."""

from __future__ import annotations

from collections.abc import Sequence

from copilot_kit.constants.config import DEFAULT_MIN_ALIGNMENT_WIDTH
from copilot_kit.model import FileEntry

BRANCH: str = "├── "
LAST_BRANCH: str = "└── "
PIPE_INDENT: str = "│   "
BLANK_INDENT: str = "    "
COMMENT_MARKER: str = " # "


def alignment_width(entries: Sequence[FileEntry], minimum: int = DEFAULT_MIN_ALIGNMENT_WIDTH) -> int:
    """Column width filenames are padded to, shared across the whole tree."""
    return max([len(entry.filename) for entry in entries] + [minimum])


def render_file_line(entry: FileEntry, *, width: int, last_dir: bool, last_file: bool) -> str:
    indent = BLANK_INDENT if last_dir else PIPE_INDENT
    branch = LAST_BRANCH if last_file else BRANCH
    comment = f"{COMMENT_MARKER}{entry.short_description}" if entry.short_description else ""
    return f"{indent}{branch}{entry.filename.ljust(width)}{comment}"


def render_structure(
    root_label: str,
    directories: Sequence[str],
    entries: Sequence[FileEntry],
    *,
    min_width: int = DEFAULT_MIN_ALIGNMENT_WIDTH,
) -> str:
    """Render the repository structure block.

    Directories are drawn in the order given, each followed by its entries
    in the order given. Directories without entries still get a line.
    """
    width = alignment_width(entries, min_width)
    by_directory: dict[str, list[FileEntry]] = {name: [] for name in directories}
    for entry in entries:
        by_directory.setdefault(entry.directory, []).append(entry)

    lines = [f"{root_label}/"]
    for dir_index, name in enumerate(directories):
        last_dir = dir_index == len(directories) - 1
        lines.append(f"{LAST_BRANCH if last_dir else BRANCH}{name}/")
        files = by_directory[name]
        for file_index, entry in enumerate(files):
            lines.append(
                render_file_line(
                    entry,
                    width=width,
                    last_dir=last_dir,
                    last_file=file_index == len(files) - 1,
                )
            )
    return "\n".join(lines)
