"""Output helpers: matched lines go to stdout, diagnostics and usage to stderr."""

# ruff: noqa: T201 -- output layer

import sys

from rich.console import Console
from rich.markup import escape

USAGE_OPTIONS = (
    ("-v", "invert match: print lines that do not match instead"),
    ("-g", "dump regex capture groups"),
)


def print_plain(*messages: object) -> None:
    """Print messages to stdout with the builtin print, untouched by Rich markup."""
    print(*messages)


def print_error(message: str) -> None:
    """Print a single diagnostic line to stderr."""
    print(message, file=sys.stderr)


def print_usage(prog: str) -> None:
    """Print usage guidance for ``prog`` to stderr."""
    console = Console(stderr=True, highlight=False)
    console.print(f"usage: {escape(prog)} \\[options] query file")
    console.print()
    console.print("file: file path")
    console.print("query: search string as regex")
    console.print("options:")
    for flag, help_text in USAGE_OPTIONS:
        console.print(f"    [bold]{flag}[/bold]: {help_text}")
    console.print()
