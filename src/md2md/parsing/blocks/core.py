"""Core block parsing for md2md parser.

Provides block dispatch: separators, headings and paragraphs.

Blocks are tried in a fixed order at the cursor and the first one that
matches wins:

1. Separator: one or more newlines
2. Heading: setext, then ATX (see heading.py)
3. Paragraph: fallback, always consumes at least one character
"""

from __future__ import annotations

from md2md.errors import ParseError
from md2md.nodes import Block, Paragraph, Separator
from md2md.parsing.charsets import BLOCK_TERMINATOR_CHARS


class BlockParsingCoreMixin:
    """Core block parsing methods.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _source_file: str | None
        - _pos: int

    Required Host Methods:
        - _at_end() -> bool
        - _line_col(offset) -> tuple[int, int]
        - _location(start, end) -> SourceLocation
        - _parse_inline(start, end) -> tuple[Inline, ...]
        - _try_parse_heading() -> Heading | None

    """

    def _parse_block(self) -> Block:
        """Parse a single block element at the cursor.

        Raises:
            ParseError: If no block alternative consumed any input
        """
        start = self._pos

        block: Block | None = self._try_parse_separator()
        if block is None:
            block = self._try_parse_heading()
        if block is None:
            block = self._parse_paragraph()

        if self._pos <= start:
            lineno, col = self._line_col(start)
            raise ParseError(
                "block segmenter made no progress",
                lineno=lineno,
                col_offset=col,
                source_file=self._source_file,
                offset=start,
            )
        return block

    def _try_parse_separator(self) -> Separator | None:
        """Consume a run of newlines as one separator."""
        source = self._source
        start = pos = self._pos
        source_len = self._source_len
        while pos < source_len and source[pos] == "\n":
            pos += 1
        if pos == start:
            return None
        self._pos = pos
        return Separator(location=self._location(start, pos), count=pos - start)

    def _parse_paragraph(self) -> Paragraph:
        """Parse a paragraph from the cursor up to the next block terminator."""
        start = self._pos
        end = self._find_paragraph_end(start)
        children = self._parse_inline(start, end)
        self._pos = end
        return Paragraph(location=self._location(start, end), children=children)

    def _find_paragraph_end(self, start: int) -> int:
        """Offset of the newline that ends the paragraph starting at ``start``.

        A paragraph ends at a newline followed by another newline, or by a
        character that may start a heading (``=``, ``-`` or ``#``). The
        terminator is left for the next block. Without one the paragraph
        runs to the end of the buffer.
        """
        source = self._source
        last = self._source_len - 1
        newline = source.find("\n", start)
        while newline != -1 and newline < last:
            if source[newline + 1] in BLOCK_TERMINATOR_CHARS:
                return newline
            newline = source.find("\n", newline + 1)
        return self._source_len
