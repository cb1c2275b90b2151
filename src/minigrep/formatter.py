"""Per-line output decision: emit nothing, the full line, or its capture groups."""

import re
from collections.abc import Sequence

from .options import Options
from .output import print_plain


def should_emit(options: Options, is_match: bool) -> bool:
    """Return the match verdict, flipped when inverting."""
    return not is_match if options.invert_match else is_match


def capture_set(pattern: re.Pattern[str], line: str) -> list[str] | None:
    """Return the whole match followed by every group, or None if the line doesn't match.

    Groups that did not take part in the match are returned as empty strings.
    """
    match = pattern.search(line)
    if match is None:
        return None
    return [match.group(0), *match.groups(default="")]


def format_capture_groups(captures: Sequence[str]) -> str:
    """Join the groups (whole match excluded) with commas.

    A pattern without groups leaves only the whole match, which is returned as is.
    """
    if len(captures) == 1:
        return captures[0]
    return ",".join(captures[1:])


def emit(options: Options, pattern: re.Pattern[str], line: str, is_match: bool) -> None:
    """Write the line, or its capture groups, to stdout if it should be emitted."""
    if not should_emit(options, is_match):
        return

    if not options.dump_capture_groups:
        print_plain(line)
        return

    captures = capture_set(pattern, line)
    # no match on this line
    if captures is None:
        return
    print_plain(format_capture_groups(captures))
