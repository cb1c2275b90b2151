"""Pattern compilation and the per-line match predicate."""

import logging
import re

from .errors import PatternCompileError

logger = logging.getLogger(__name__)


def compile_pattern(query: str) -> re.Pattern[str]:
    """Compile the query text, raising PatternCompileError if it is not a valid regex."""
    try:
        pattern = re.compile(query)
    except re.error as e:
        raise PatternCompileError(query, e) from e
    logger.debug("compiled pattern %r with %d group(s)", query, pattern.groups)
    return pattern


def is_match(pattern: re.Pattern[str], line: str) -> bool:
    """Return True if the pattern matches anywhere within the line."""
    return pattern.search(line) is not None
