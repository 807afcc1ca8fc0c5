"""Core inline parsing for md2md parser.

Inline content is parsed one step at a time from a single position,
inside ``[pos, end)`` bounds of the shared source buffer. Each step looks
at the next character(s) and tries the matching span grammar:

    ``![``   image
    ``[``    link
    `````    code span
    ``<``    autolink
    ``\\n``   soft break (the newline plus following whitespace)
    other    run of plain text

When a span grammar fails, exactly one literal character is emitted and
parsing resumes at the next position. Every step consumes at least one
character, so the loop always terminates.

Thread Safety:
All methods are stateless or use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

import re

from md2md.errors import ParseError
from md2md.nodes import Inline, SoftBreak, Text
from md2md.parsing.charsets import SOFT_BREAK_WHITESPACE, TEXT_STOP_CHARS


# Ordered (prefix, parser method) dispatch; first matching prefix wins
_INLINE_DISPATCH: tuple[tuple[str, str], ...] = (
    ("![", "_try_parse_image"),
    ("[", "_try_parse_link"),
    ("`", "_try_parse_code_span"),
    ("<", "_try_parse_autolink"),
)

# Maximal run of characters that cannot start markup
_TEXT_RUN_PATTERN = re.compile(f"[^{re.escape(''.join(sorted(TEXT_STOP_CHARS)))}]+")

# Newline plus any whitespace after it
_SOFT_BREAK_PATTERN = re.compile(f"\n[{re.escape(''.join(sorted(SOFT_BREAK_WHITESPACE)))}]*")


class InlineParsingCoreMixin:
    """Core inline parsing methods.

    Required Host Attributes:
        - _source: str
        - _source_file: str | None

    Required Host Methods (from other mixins):
        - _location(start, end) -> SourceLocation
        - _line_col(offset) -> tuple[int, int]
        - _try_parse_link(pos, end) -> tuple | None
        - _try_parse_image(pos, end) -> tuple | None
        - _try_parse_code_span(pos, end) -> tuple | None
        - _try_parse_autolink(pos, end) -> tuple | None

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _source: str
    # _source_file: str | None

    def _parse_inline(self, start: int, end: int) -> tuple[Inline, ...]:
        """Parse ``source[start:end]`` into a sequence of inline spans."""
        children: list[Inline] = []
        children_append = children.append  # Local reference for speed
        pos = start

        while pos < end:
            node, new_pos = self._parse_inline_step(pos, end)
            if new_pos <= pos:
                lineno, col = self._line_col(pos)
                raise ParseError(
                    "inline parser made no progress",
                    lineno=lineno,
                    col_offset=col,
                    source_file=self._source_file,
                    offset=pos,
                )
            children_append(node)
            pos = new_pos

        return tuple(children)

    def _parse_inline_step(self, pos: int, end: int) -> tuple[Inline, int]:
        """Parse exactly one inline span starting at pos."""
        source = self._source

        for prefix, parser_name in _INLINE_DISPATCH:
            if source.startswith(prefix, pos, end):
                result = getattr(self, parser_name)(pos, end)
                if result is not None:
                    return result
                # Failed span grammar: one literal character, retry after it
                return self._text(pos, pos + 1), pos + 1

        if source[pos] == "\n":
            match = _SOFT_BREAK_PATTERN.match(source, pos, end)
            assert match is not None
            stop = match.end()
            return SoftBreak(location=self._location(pos, stop)), stop

        match = _TEXT_RUN_PATTERN.match(source, pos, end)
        # Nothing plain to take (``]``, ``>`` or a lone ``!``): the rest is text
        stop = match.end() if match else end
        return self._text(pos, stop), stop

    def _text(self, start: int, end: int) -> Text:
        return Text(location=self._location(start, end), content=self._source[start:end])
