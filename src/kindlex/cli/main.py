# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the kindlex command-line interface."""

import argparse
import sys
from pathlib import Path

from kindlex.lexer.cursor import TokenCursor, TokenStreamError
from kindlex.lexer.dump import TokenDumpError, load_token_dump

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the kindlex CLI."""
    parser = argparse.ArgumentParser(
        prog="kindlex",
        description="kindlex: inspect Kind token streams",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Print the canonical rendering of each token",
        description="Print the canonical rendering of every token in a dump, one per line.",
    )
    render_parser.add_argument("file", help="Path to a YAML token dump")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a token stream for errors",
        description=(
            "Verify that a token dump ends in a single end-of-input token and "
            "report the diagnostics carried by error tokens."
        ),
    )
    check_parser.add_argument("file", help="Path to a YAML token dump")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "render":
        return _cmd_render(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    """Handle the render subcommand."""
    try:
        items = load_token_dump(Path(args.file))
    except TokenDumpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for item in items:
        print(item.token)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        items = load_token_dump(Path(args.file))
        cursor = TokenCursor(items)
    except (TokenDumpError, TokenStreamError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Checking {len(items)} token(s)...")
    while not cursor.at_end():
        cursor.advance()

    diagnostics = cursor.diagnostics
    for diagnostic in diagnostics:
        print(f"Error: {diagnostic.format()}", file=sys.stderr)
    if diagnostics:
        return 1

    print("No issues found.")
    return 0
