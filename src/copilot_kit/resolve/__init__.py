"""Title and description resolution."""

from .descriptions import resolve_description, resolve_description_from_text, resolve_short_description
from .documents import resolve_document
from .titles import resolve_title, resolve_title_from_text

__all__ = [
    "resolve_description",
    "resolve_description_from_text",
    "resolve_document",
    "resolve_short_description",
    "resolve_title",
    "resolve_title_from_text",
]
