"""Bracket and parenthesis balancing for link and image syntax.

Link text may contain nested ``[...]`` groups and inline destinations may
contain nested ``(...)`` groups. Only the delimiter pair being balanced is
counted: brackets never balance parentheses and vice versa.

The scan is iterative and jumps from delimiter to delimiter, so
adversarial input cannot exhaust the stack. Nesting deeper than
``max_depth`` is reported as unbalanced, which also bounds how deep link
text can recurse into the inline parser.

Example:
    >>> text = "[a [b] c](url)"
    >>> find_balanced_close(text, 1, len(text), "[", "]")
    8
"""

import re
from functools import cache

from md2md.config import DEFAULT_MAX_NESTING


@cache
def _delimiter_pattern(open_char: str, close_char: str) -> re.Pattern[str]:
    """Compiled character class matching either delimiter."""
    return re.compile(f"[{re.escape(open_char)}{re.escape(close_char)}]")


def find_balanced_close(
    source: str,
    start: int,
    end: int,
    open_char: str,
    close_char: str,
    max_depth: int = DEFAULT_MAX_NESTING,
) -> int:
    """Find the close character matching an already consumed opener.

    Args:
        source: Buffer being parsed
        start: Position just after the opening delimiter
        end: Exclusive scan bound
        open_char: Opening delimiter (``[`` or ``(``)
        close_char: Closing delimiter (``]`` or ``)``)
        max_depth: Deepest nesting accepted, counting the consumed opener

    Returns:
        Index of the matching close character, or ``end`` when the group is
        unbalanced within the bound or nests deeper than max_depth. Never
        raises.

    """
    search = _delimiter_pattern(open_char, close_char).search
    depth = 1
    match = search(source, start, end)
    while match is not None:
        pos = match.start()
        if source[pos] == open_char:
            depth += 1
            if depth > max_depth:
                return end
        else:
            depth -= 1
            if depth == 0:
                return pos
        match = search(source, pos + 1, end)
    return end
