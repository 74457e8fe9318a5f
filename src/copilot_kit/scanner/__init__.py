"""Template-pack scanning."""

from .discovery import build_file_entry, collect_entries, list_markdown_files, list_template_dirs

__all__ = ["build_file_entry", "collect_entries", "list_markdown_files", "list_template_dirs"]
