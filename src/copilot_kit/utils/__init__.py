"""Shared helpers."""

from .naming import humanize_name, recognized_suffix, title_from_filename

__all__ = ["humanize_name", "recognized_suffix", "title_from_filename"]
