"""Constants for frontmatter parsing behavior."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
TITLE_KEY: str = "title:"
HEADING_PREFIX: str = "# "
BLOCK_SCALAR_INDENT: str = "  "

BLOCK_DESCRIPTION_PATTERN: Pattern[str] = re.compile(r"^description:\s*\|\s*$")
INLINE_DESCRIPTION_PATTERN: Pattern[str] = re.compile(r"""^description:\s*['"]?(.+?)['"]?$""")
FRONTMATTER_KEY_PATTERN: Pattern[str] = re.compile(r"^[a-zA-Z0-9_-]+:")
# Strips one leading and one trailing quote, matching or not.
SURROUNDING_QUOTES_PATTERN: Pattern[str] = re.compile(r"""^['"]|['"]$""")
FILENAME_SEPARATOR_PATTERN: Pattern[str] = re.compile(r"[-_]")
WORD_START_PATTERN: Pattern[str] = re.compile(r"\b\w")
