"""CLI application entry point and command routing for lambdava.

This module is the **sole error boundary** for the command line.  It
catches :class:`~lambdava.exceptions.LambdavaError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering short messages and returning
well-defined exit codes.

Commands
--------
* ``lambdava sort WORD...``  — print words in natural order
* ``lambdava pair FIRST SECOND``  — print a pair
* ``lambdava --version``
"""

from __future__ import annotations

import argparse
import logging
import sys

from lambdava.cli import exit_codes
from lambdava.cli.console import console, err_console
from lambdava.core.functions import function2
from lambdava.core.pairs import ObjectsPair
from lambdava.core.protocols import Function2
from lambdava.core.stream import functional
from lambdava.exceptions import LambdavaError
from lambdava.logger import setup_logger
from lambdava.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="lambdava",
        description="Functional utility kit: pairs and sortable sequences.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_subparsers(dest="command")

    sort_parser = commands.add_parser("sort", help="Print words in sorted order.")
    sort_parser.add_argument("words", nargs="+", help="Words to sort.")
    order = sort_parser.add_mutually_exclusive_group()
    order.add_argument(
        "--first",
        metavar="VALUE",
        default=None,
        help="Rank VALUE ahead of every other word.",
    )
    order.add_argument(
        "--reverse",
        action="store_true",
        help="Sort in descending natural order.",
    )

    pair_parser = commands.add_parser("pair", help="Print a pair of values.")
    pair_parser.add_argument("first")
    pair_parser.add_argument("second")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def pinned_first(value: str) -> Function2[str, str, int]:
    """Comparator ranking *value* ahead of everything, else natural order."""

    @function2
    def compare(left: str, right: str) -> int:
        if left == value and right != value:
            return -1
        if left != value and right == value:
            return 1
        return (left > right) - (left < right)

    return compare


def _handle_sort(words: list[str], *, first: str | None, reverse: bool) -> int:
    """Sort *words* and print one per line."""
    sequence = functional(words)
    if first is not None:
        ordered = sequence.sort_by(pinned_first(first))
    else:
        ordered = sequence.sort(reverse=reverse)

    for word in ordered:
        console.print(word, markup=False)
    return exit_codes.SUCCESS


def _handle_pair(first: str, second: str) -> int:
    """Print the ``(first, second)`` rendering of a pair."""
    console.print(str(ObjectsPair.of(first, second)), markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lambdava CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = setup_logger()
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "sort":
        return _handle_sort(args.words, first=args.first, reverse=args.reverse)

    return _handle_pair(args.first, args.second)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except LambdavaError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            err_console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
