"""Default short descriptions shown beside files in the structure tree."""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_SHORT_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "commit.instructions.md": "Git commit message standards",
        "copilot.instructions.md": "Code generation guidelines",
        "debug.instructions.md": "Error handling and debugging",
        "pr.instructions.md": "Pull request documentation",
        "review.instructions.md": "Code review standards",
        "security-and-owasp.instructions.md": "Security best practices",
        "performance-optimization.instructions.md": "Performance guidelines",
        "clean.prompt.md": "Code cleanup workflows",
        "debug.prompt.md": "Debugging assistance",
        "doc.prompt.md": "Documentation generation",
        "review.prompt.md": "Code review assistance",
        "security.prompt.md": "Security analysis",
        "think.prompt.md": "Problem analysis",
        "debug.chatmode.md": "Debugging assistance mode",
        "prd.chatmode.md": "Product requirements mode",
    }
)

INSTRUCTIONS_FALLBACK_TEMPLATE: str = "{word} specific standards"
CHATMODE_FALLBACK_TEMPLATE: str = "{title} mode"
