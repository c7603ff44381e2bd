"""Command-line entry point for json-gobject."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .codegen.cli_integration import create_codegen_subparsers
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="json-gobject",
        description="Generate GObject and json-glib C boilerplate from JSON Schema",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show progress information"
    )
    parser.add_argument("--debug", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    create_codegen_subparsers(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code.

    Usage errors exit through argparse with status 2; the status is
    returned instead of raised so callers can embed the CLI.
    """
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 2

    setup_logging(verbose=args.verbose, debug=args.debug)
    logger.debug("Running command: %s", args.command)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
