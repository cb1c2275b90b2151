"""Command-line entry point: ``minigrep [options] query file``.

Click never parses the tokens: ``RawTokensCommand`` hands them over untouched
to ``Options.from_args``, so ``--``, ``-v``, ``-g`` or ``-\\d+V`` as a query or
filename still land in their position. ``--version`` / ``-V`` is honored only as
the sole token or among the flags ahead of the query.
"""

import importlib.metadata
from collections.abc import Sequence
from typing import NoReturn

import click
import typer
from typer.core import TyperCommand

from .errors import MinigrepError
from .options import Options
from .output import print_plain
from .search import run
from .utils import fatal

PACKAGE_NAME = "minigrep"
VERSION_FLAGS = frozenset({"--version", "-V"})

# ctx.meta key holding the unparsed tokens
_RAW_TOKENS = "minigrep.raw_tokens"


class RawTokensCommand(TyperCommand):
    """TyperCommand that stores its arguments in ``ctx.meta`` instead of parsing them."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Stash the raw tokens and let Click parse an empty list."""
        ctx.meta[_RAW_TOKENS] = list(args)
        return super().parse_args(ctx, [])


def is_version_request(tokens: Sequence[str]) -> bool:
    """Check whether the version flag is the sole token or sits among the leading flags."""
    if len(tokens) == 1:
        return tokens[0] in VERSION_FLAGS
    return any(token in VERSION_FLAGS for token in tokens[:-2])


def print_version_and_exit(package_name: str) -> NoReturn:
    """Print ``{package_name}: {version}`` and exit 0."""
    print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
    raise typer.Exit


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


@app.command(cls=RawTokensCommand, add_help_option=False)
def main(ctx: typer.Context) -> None:
    """Print lines of a file that match a regular expression."""
    tokens: list[str] = ctx.meta.get(_RAW_TOKENS, [])
    if is_version_request(tokens):
        print_version_and_exit(PACKAGE_NAME)

    prog = ctx.info_name or PACKAGE_NAME
    options = Options.from_args_or_exit([prog, *tokens])
    try:
        run(options)
    except MinigrepError as e:
        fatal(str(e))
