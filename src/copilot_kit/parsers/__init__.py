"""Markdown frontmatter parsing."""

from .frontmatter import extract_description, extract_title, first_heading, split_frontmatter

__all__ = ["extract_description", "extract_title", "first_heading", "split_frontmatter"]
