"""Command-line entry point for chaincode_builder."""

from __future__ import annotations

import argparse
from typing import Sequence

from .codegen.cli_integration import (
    console,
    create_blocks_subparser,
    create_generate_subparser,
    create_init_project_subparser,
    list_languages,
    show_language_info,
)
from .codegen.core.config import LOG_LEVELS
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chaincode-builder",
        description="Generate Hyperledger Fabric chaincode from block projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chaincode-builder init-project project.json
  chaincode-builder generate project.json -o chaincode.go
  chaincode-builder blocks
  chaincode-builder --list-languages
        """.strip(),
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: log_level from --config, else WARNING)",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    parser.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed information about a language and exit",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    create_generate_subparser(subparsers)
    create_init_project_subparser(subparsers)
    create_blocks_subparser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments excluding the program name (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or "WARNING")
    logger.debug("Parsed arguments: %s", args)

    if args.list_languages:
        return list_languages()

    if args.language_info:
        return show_language_info(args.language_info)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 1
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        return 1
