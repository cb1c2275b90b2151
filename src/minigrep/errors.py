"""Exception hierarchy for minigrep.

Library code raises these; the CLI layer turns them into a stderr diagnostic
and exit status 1.
"""

from pathlib import Path


class MinigrepError(Exception):
    """Base class for all minigrep errors."""


class ArgumentError(MinigrepError):
    """Invocation arguments can't be turned into options."""

    def __init__(self, code: str, message: str) -> None:
        """Store a machine-readable code next to the message."""
        super().__init__(message)
        self.code = code


class FileOpenError(MinigrepError):
    """The input file can't be opened."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        """Remember the path and the underlying OS error."""
        super().__init__(f"couldn't open {path}: {cause}")
        self.path = str(path)
        self.cause = cause


class PatternCompileError(MinigrepError):
    """The query is not a valid regular expression."""

    def __init__(self, query: str, cause: Exception) -> None:
        """Remember the query text and the regex engine's error."""
        super().__init__(f"error parsing pattern {query}: {cause}")
        self.query = query
        self.cause = cause


class LineDecodeError(MinigrepError):
    """A line of input is not valid text in the configured encoding."""

    def __init__(self, cause: UnicodeDecodeError) -> None:
        """Remember the decoding error."""
        super().__init__(f"error reading file: {cause}")
        self.cause = cause
