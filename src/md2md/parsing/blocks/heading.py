"""Heading parsing for md2md parser.

Setext headings are tried before ATX headings: the text of a setext
heading looks like an ordinary paragraph until its underline is found.

Setext:
    Heading text
    ============

    The underline search walks forward line by line from the line after
    the block start. A blank line (or the end of the buffer) stops the
    search, so ``foo\\n\\n---`` is not a heading. Search results are
    memoized per line start, which keeps repeated searches over the same
    lines linear.

ATX:
    ### Heading text ###

    A run of one to six ``#`` after optional indentation. Seven or more
    is not a heading.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from md2md.nodes import Heading
from md2md.parsing.charsets import HORIZONTAL_WHITESPACE, SETEXT_UNDERLINE_LEVELS

# Whole-line setext underline: a run of = or -, optionally padded
_SETEXT_UNDERLINE_RE = re.compile(r"[ \t]*(=+|-+)[ \t]*")

# ATX opening: optional indent, 1-6 #, optional spaces (7+ # is not a heading)
_ATX_OPEN_RE = re.compile(r"[ \t]*(#{1,6})(?!#)[ \t]*")


class SetextUnderline(NamedTuple):
    """Setext underline found by the forward search."""

    start: int
    end: int
    level: int
    level_len: int


class HeadingParsingMixin:
    """Mixin for setext and ATX heading parsing.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _pos: int
        - _setext_memo: dict[int, SetextUnderline | None]

    Required Host Methods:
        - _line_end(offset) -> int
        - _location(start, end) -> SourceLocation
        - _parse_inline(start, end) -> tuple[Inline, ...]

    """

    def _try_parse_heading(self) -> Heading | None:
        """Try a setext heading, then an ATX heading, at the cursor."""
        return self._try_parse_setext_heading() or self._try_parse_atx_heading()

    def _try_parse_setext_heading(self) -> Heading | None:
        """Parse a setext heading starting at the cursor, if one is there.

        The content runs from the cursor to the newline before the
        underline. The underline line is consumed; its newline is not.
        """
        start = self._pos
        first_line_end = self._line_end(start)
        if first_line_end >= self._source_len:
            return None

        underline = self._find_setext_underline(first_line_end + 1)
        if underline is None:
            return None

        children = self._parse_inline(start, underline.start - 1)
        self._pos = underline.end
        return Heading(
            location=self._location(start, underline.end),
            level=underline.level,  # type: ignore[arg-type]
            children=children,
            style="setext",
            level_len=underline.level_len,
        )

    def _find_setext_underline(self, line_start: int) -> SetextUnderline | None:
        """Find the first underline line at or after line_start.

        Stops at the first blank line or at the end of the buffer.
        """
        memo = self._setext_memo
        source = self._source
        source_len = self._source_len
        visited: list[int] = []
        result: SetextUnderline | None = None

        while True:
            if line_start in memo:
                result = memo[line_start]
                break
            visited.append(line_start)

            line_end = self._line_end(line_start)
            if line_end == line_start:
                break

            match = _SETEXT_UNDERLINE_RE.fullmatch(source, line_start, line_end)
            if match:
                run = match.group(1)
                result = SetextUnderline(
                    start=line_start,
                    end=line_end,
                    level=SETEXT_UNDERLINE_LEVELS[run[0]],
                    level_len=len(run),
                )
                break

            if line_end >= source_len:
                break
            line_start = line_end + 1

        for offset in visited:
            memo[offset] = result
        return result

    def _try_parse_atx_heading(self) -> Heading | None:
        """Parse an ATX heading (# Heading) at the cursor, if one is there.

        Trailing whitespace, a closing run of ``#`` and the whitespace
        before it are stripped. A heading without content is not a heading.
        The line's newline is not consumed.
        """
        source = self._source
        start = self._pos
        line_end = self._line_end(start)

        match = _ATX_OPEN_RE.match(source, start, line_end)
        if match is None:
            return None

        content_start = match.end()
        content_end = line_end
        while content_end > content_start and source[content_end - 1] in HORIZONTAL_WHITESPACE:
            content_end -= 1
        while content_end > content_start and source[content_end - 1] == "#":
            content_end -= 1
        while content_end > content_start and source[content_end - 1] in HORIZONTAL_WHITESPACE:
            content_end -= 1
        if content_end == content_start:
            return None

        children = self._parse_inline(content_start, content_end)
        self._pos = line_end
        return Heading(
            location=self._location(start, line_end),
            level=len(match.group(1)),  # type: ignore[arg-type]
            children=children,
            style="atx",
        )
