"""Invocation options: raw argument tokens normalized into an immutable model."""

import logging
from collections.abc import Sequence
from typing import Self

import typer
from mm_result import Result
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ArgumentError
from .output import print_error, print_usage

logger = logging.getLogger(__name__)

INVERT_MATCH_FLAG = "-v"
DUMP_CAPTURE_GROUPS_FLAG = "-g"
KNOWN_FLAGS = frozenset({INVERT_MATCH_FLAG, DUMP_CAPTURE_GROUPS_FLAG})

# program name, query, filename
MIN_ARGS = 3


class Options(BaseModel):
    """Options for a single search run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str = Field(min_length=1)
    query: str
    invert_match: bool = False
    dump_capture_groups: bool = False

    @classmethod
    def from_args(cls, args: Sequence[str], *, strict: bool = False) -> Result[Self]:
        """Build options from the full argument list, program name included.

        The last token is always the filename and the one before it the query,
        whatever they look like. Tokens in between the program name and the
        query are scanned for ``-v`` and ``-g``; anything else there is ignored,
        or rejected when ``strict`` is set.
        """
        if len(args) < MIN_ARGS:
            error = ArgumentError("insufficient_arguments", "not enough arguments")
            return Result.err((error.code, error), context={"message": str(error)})

        invert_match = False
        dump_capture_groups = False
        for arg in args[1:-2]:
            if arg == INVERT_MATCH_FLAG:
                invert_match = True
            elif arg == DUMP_CAPTURE_GROUPS_FLAG:
                dump_capture_groups = True
            elif strict:
                error = ArgumentError("unexpected_argument", f"unexpected argument: {arg}")
                return Result.err((error.code, error), context={"message": str(error)})

        try:
            options = cls(
                filename=args[-1],
                query=args[-2],
                invert_match=invert_match,
                dump_capture_groups=dump_capture_groups,
            )
        except ValidationError as e:
            error = ArgumentError("invalid_arguments", "file path must not be empty")
            return Result.err((error.code, error), context={"message": str(error), "errors": e.errors()})

        logger.debug("parsed options: %s", options)
        return Result.ok(options)

    @classmethod
    def from_args_or_exit(cls, args: Sequence[str], *, strict: bool = False) -> Self:
        """Build options, or print the problem and usage to stderr and exit(1)."""
        result = cls.from_args(args, strict=strict)
        if result.is_ok():
            return result.unwrap()
        if result.context:
            print_error(result.context["message"])
        print_usage(args[0] if args else "minigrep")
        raise typer.Exit(1)
