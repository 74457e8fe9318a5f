"""CLI entrypoint for README generation."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from copilot_kit import __version__
from copilot_kit.config import load_config
from copilot_kit.constants.branding import CLI_DESCRIPTION, CLI_PROG
from copilot_kit.exceptions import ConfigError, KitError
from copilot_kit.generator import update_readme
from copilot_kit.model import WriteOutcome

logger = logging.getLogger(__name__)

STATUS_MESSAGES: dict[str, str] = {
    "created": "{name} created successfully!",
    "updated": "{name} updated successfully!",
    "unchanged": "{name} is already up to date. No changes needed.",
    "stale": "{name} is out of date. Run without --check to regenerate it.",
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Repository root holding the template pack (default: current directory)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Explicit config file (default: <root>/copilot-kit.yaml)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the README would change",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show per-file resolution details")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    root = (args.root or Path.cwd()).resolve()
    logger.info("Generating README from scratch...")
    try:
        config = load_config(root, args.config)
        outcome = update_readme(root, config, check=args.check)
    except ConfigError as exc:
        logger.error("Configuration error: %s", exc)
        return 2
    except KitError as exc:
        logger.error("Error generating README: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Error writing README: %s", exc)
        return 1

    logger.info(_status_message(outcome))
    return 1 if outcome.status == "stale" else 0


def entrypoint() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


def _status_message(outcome: WriteOutcome) -> str:
    return STATUS_MESSAGES[outcome.status].format(name=outcome.path.name)


if __name__ == "__main__":
    raise SystemExit(main())
