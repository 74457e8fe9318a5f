"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "Copilot-Kit"
CLI_PROG: str = "copilot-kit-readme"
CLI_DESCRIPTION: str = f"Regenerate the {BRAND_NAME} README from the .github template pack."
