"""Constants for template-pack discovery."""

from __future__ import annotations

MARKDOWN_SUFFIX: str = ".md"
INSTRUCTIONS_SUFFIX: str = ".instructions.md"
PROMPT_SUFFIX: str = ".prompt.md"
CHATMODE_SUFFIX: str = ".chatmode.md"

# Order matters for suffix stripping: first match wins.
RECOGNIZED_SUFFIXES: tuple[str, ...] = (PROMPT_SUFFIX, CHATMODE_SUFFIX, INSTRUCTIONS_SUFFIX)

INSTRUCTIONS_DIRNAME: str = "instructions"
PROMPTS_DIRNAME: str = "prompts"
CHATMODES_DIRNAME: str = "chatmodes"

HIDDEN_PREFIX: str = "."
