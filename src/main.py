# src/main.py — v1
"""CLI entry point: unwire and check commands.

Usage:
    forumwire unwire <file> --kind discussions|discussion|activity [--compact]
    forumwire check <file> --kind discussions|discussion|activity
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError

from forumwire.config.settings import ConfigurationError
from forumwire.version import __version__

logger = logging.getLogger(__name__)

KINDS = ("discussions", "discussion", "activity")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        _setup_logging(args.verbose)
    except (ConfigurationError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="forumwire",
        description=f"forumwire v{__version__}: forum wire payload tools",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- unwire ---
    p_unwire = subparsers.add_parser(
        "unwire", help="Denormalize a wire payload and print the domain JSON",
    )
    p_unwire.add_argument("file", type=Path, help="Path to wire JSON file")
    p_unwire.add_argument(
        "-k", "--kind", choices=KINDS, required=True,
        help="Payload kind",
    )
    p_unwire.add_argument(
        "--compact", action="store_true",
        help="Print single-line JSON",
    )
    p_unwire.set_defaults(func=_cmd_unwire)

    # --- check ---
    p_check = subparsers.add_parser(
        "check", help="Check a wire payload's users table",
    )
    p_check.add_argument("file", type=Path, help="Path to wire JSON file")
    p_check.add_argument(
        "-k", "--kind", choices=KINDS, required=True,
        help="Payload kind",
    )
    p_check.set_defaults(func=_cmd_check)

    return parser


def _load_wire(path: Path, kind: str) -> BaseModel | None:
    """Read and parse a wire file, logging why it could not be used."""
    from forumwire.wire.models import WireDiscussion, WireDiscussions, WireUserActivity

    models: dict[str, type[BaseModel]] = {
        "discussions": WireDiscussions,
        "discussion": WireDiscussion,
        "activity": WireUserActivity,
    }
    if not path.exists():
        logger.error("File not found: %s", path)
        return None
    try:
        return models[kind].model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        logger.error("Not a %s wire payload: %s", kind, exc)
        return None


def _cmd_unwire(args: argparse.Namespace) -> int:
    """Denormalize a wire file."""
    from forumwire.wire.denormalizer import (
        denormalize_discussion,
        denormalize_discussions,
        denormalize_user_activity,
    )

    wire = _load_wire(args.file, args.kind)
    if wire is None:
        return 1

    convert = {
        "discussions": denormalize_discussions,
        "discussion": denormalize_discussion,
        "activity": denormalize_user_activity,
    }[args.kind]
    domain = convert(wire)  # type: ignore[arg-type]
    print(domain.model_dump_json(by_alias=True, indent=None if args.compact else 2))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Report users-table violations; exit 1 if there are any."""
    from forumwire.wire.validation import check_payload

    wire = _load_wire(args.file, args.kind)
    if wire is None:
        return 1

    report = check_payload(wire)  # type: ignore[arg-type]
    print(json.dumps({"clean": report.is_clean, **report.model_dump()}, indent=2))
    if not report.is_clean:
        logger.warning("%s: %s", args.file, report.describe())
        return 1
    return 0


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage from LOG_* settings."""
    from forumwire.config.settings import Settings
    from forumwire.logging.logger import setup_logging_from_settings

    setup_logging_from_settings(Settings(), level="DEBUG" if verbose else None)


if __name__ == "__main__":
    sys.exit(main())
