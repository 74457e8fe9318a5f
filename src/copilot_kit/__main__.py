"""Allow ``python -m copilot_kit``."""

from __future__ import annotations

from copilot_kit.cli.main import main

raise SystemExit(main())
