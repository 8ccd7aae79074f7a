"""CLI application entry point and command routing for css-dynit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dynit.exceptions.DynitError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No formatting logic lives here — all work is delegated to ``core``.
* Generated CSS is written to stdout with ``print()`` so it can be piped;
  diagnostics go to stderr through the console proxy.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import math
import sys

from dynit.cli import exit_codes
from dynit.cli.console import console
from dynit.core.breakpoints import resolve_breakpoint
from dynit.core.interpolate import dynamic_interpolate
from dynit.core.media import (
    media_query_max_width,
    media_query_min_width,
    media_query_range,
)
from dynit.exceptions import DynitError
from dynit.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _number(text: str) -> float:
    """argparse ``type=`` for plain numeric values (``20``, ``-1.5``)."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``css-dynit interpolate MIN_W MIN_V MAX_W MAX_V``
    * ``css-dynit up BP`` / ``down BP`` / ``between BP BP``
    * ``css-dynit breakpoints``
    * ``css-dynit --version``

    Breakpoint arguments accept a name (``tablet``) or a pixel width.
    """
    parser = argparse.ArgumentParser(
        prog="css-dynit",
        description="Responsive CSS values and media queries from breakpoints.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject non-finite numbers, negative widths and reversed ranges.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    interpolate = commands.add_parser(
        "interpolate",
        help="Fluid calc() value between two viewport widths.",
    )
    interpolate.add_argument("min_width", metavar="MIN_W")
    interpolate.add_argument("min_value", metavar="MIN_V", type=_number)
    interpolate.add_argument("max_width", metavar="MAX_W")
    interpolate.add_argument("max_value", metavar="MAX_V", type=_number)

    up = commands.add_parser("up", help="@media (min-width) query.")
    up.add_argument("breakpoint", metavar="BP")

    down = commands.add_parser("down", help="@media (max-width) query.")
    down.add_argument("breakpoint", metavar="BP")

    between = commands.add_parser("between", help="@media range query.")
    between.add_argument("min_breakpoint", metavar="MIN_BP")
    between.add_argument("max_breakpoint", metavar="MAX_BP")

    commands.add_parser("breakpoints", help="List the named breakpoints.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_interpolate(args: argparse.Namespace) -> int:
    print(
        dynamic_interpolate(
            resolve_breakpoint(args.min_width),
            args.min_value,
            resolve_breakpoint(args.max_width),
            args.max_value,
            strict=args.strict,
        )
    )
    return exit_codes.SUCCESS


def _handle_up(args: argparse.Namespace) -> int:
    print(media_query_min_width(resolve_breakpoint(args.breakpoint), strict=args.strict))
    return exit_codes.SUCCESS


def _handle_down(args: argparse.Namespace) -> int:
    print(media_query_max_width(resolve_breakpoint(args.breakpoint), strict=args.strict))
    return exit_codes.SUCCESS


def _handle_between(args: argparse.Namespace) -> int:
    print(
        media_query_range(
            resolve_breakpoint(args.min_breakpoint),
            resolve_breakpoint(args.max_breakpoint),
            strict=args.strict,
        )
    )
    return exit_codes.SUCCESS


def _handle_breakpoints(args: argparse.Namespace) -> int:
    """Dispatch the ``breakpoints`` listing command."""
    from dynit.cli.breakpoint_table import run_breakpoints

    return run_breakpoints()


_HANDLERS = {
    "interpolate": _handle_interpolate,
    "up": _handle_up,
    "down": _handle_down,
    "between": _handle_between,
    "breakpoints": _handle_breakpoints,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Parse *argv* (``sys.argv[1:]`` when ``None``) and run one command.

    Returns the process exit code.  :class:`~dynit.exceptions.DynitError`
    propagates to the caller; :func:`cli` turns it into a message.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _HANDLERS[args.command](args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DynitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
