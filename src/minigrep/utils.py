from typing import NoReturn

import typer

from .output import print_error


def fatal(message: str) -> NoReturn:
    """Print ``message`` to stderr and exit with status 1."""
    print_error(message)
    raise typer.Exit(1)
