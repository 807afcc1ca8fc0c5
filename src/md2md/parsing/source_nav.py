"""Source navigation utilities for md2md parser.

Provides mixin for cursor handling and offset-to-location bookkeeping.
The parser works directly on one shared buffer; every node location is
computed from absolute offsets into it.
"""

from __future__ import annotations

from bisect import bisect_right

from md2md.location import SourceLocation


def compute_line_starts(source: str) -> list[int]:
    """Offsets at which each line of ``source`` begins."""
    starts = [0]
    pos = source.find("\n")
    while pos != -1:
        starts.append(pos + 1)
        pos = source.find("\n", pos + 1)
    return starts


class SourceNavigationMixin:
    """Mixin providing cursor and location methods.

    Required Host Attributes:
        - _source: str
        - _source_len: int (cached len(_source) for hot loops)
        - _source_file: str | None
        - _pos: int
        - _line_starts: list[int]

    """

    _source: str
    _source_len: int
    _source_file: str | None
    _pos: int
    _line_starts: list[int]

    def _at_end(self) -> bool:
        """Check if the cursor reached the end of the buffer."""
        return self._pos >= self._source_len

    def _line_end(self, offset: int) -> int:
        """Offset of the newline ending the line at ``offset`` (or EOF)."""
        end = self._source.find("\n", offset)
        if end == -1:
            return self._source_len
        return end

    def _line_col(self, offset: int) -> tuple[int, int]:
        """1-indexed (line, column) of a buffer offset."""
        lineno = bisect_right(self._line_starts, offset)
        return lineno, offset - self._line_starts[lineno - 1] + 1

    def _location(self, start: int, end: int) -> SourceLocation:
        """Location spanning ``source[start:end]``."""
        lineno, col = self._line_col(start)
        end_lineno, end_col = self._line_col(end)
        return SourceLocation(
            lineno=lineno,
            col_offset=col,
            offset=start,
            end_offset=end,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=self._source_file,
        )
