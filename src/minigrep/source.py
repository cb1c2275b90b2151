"""Input source: a text file read line by line with an explicit encoding."""

import contextlib
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from .errors import FileOpenError, LineDecodeError

DEFAULT_ENCODING = "utf-8"


@contextlib.contextmanager
def open_lines(path: str | Path, *, encoding: str = DEFAULT_ENCODING) -> Iterator[Iterator[str]]:
    """Open ``path`` and yield an iterator over its lines.

    Each line is decoded on its own, so every line before an undecodable one
    is still yielded.

    Raises:
        FileOpenError: The file can't be opened.
        LineDecodeError: A line is not valid text in ``encoding`` (raised while iterating).

    """
    try:
        f = Path(path).open("rb")  # noqa: SIM115 -- closed below
    except OSError as e:
        raise FileOpenError(path, e) from e
    with f:
        yield _iter_lines(f, encoding)


def _iter_lines(f: BinaryIO, encoding: str) -> Iterator[str]:
    """Yield decoded lines without their ``\\n`` or ``\\r\\n`` terminator."""
    for raw in f:
        try:
            line = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise LineDecodeError(e) from e
        yield strip_terminator(line)


def strip_terminator(raw: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw
