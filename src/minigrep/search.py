"""The search loop: stream lines through the matcher and the formatter."""

import logging

from .formatter import emit
from .matcher import compile_pattern, is_match
from .options import Options
from .source import DEFAULT_ENCODING, open_lines

logger = logging.getLogger(__name__)


def run(options: Options, *, encoding: str = DEFAULT_ENCODING) -> None:
    """Search ``options.filename`` for ``options.query`` and print the results.

    The file is opened before the pattern is compiled, so a missing file is
    reported even when the pattern is also broken. Any MinigrepError ends the
    run; lines already printed stay printed.
    """
    with open_lines(options.filename, encoding=encoding) as lines:
        pattern = compile_pattern(options.query)
        count = 0
        for line in lines:
            count += 1
            emit(options, pattern, line, is_match(pattern, line))
    logger.debug("searched %d line(s) of %s", count, options.filename)
