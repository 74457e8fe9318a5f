"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

ResolutionSource: TypeAlias = Literal["frontmatter", "heading", "filename", "lookup", "category", "default"]
WriteStatus: TypeAlias = Literal["created", "updated", "unchanged", "stale"]
