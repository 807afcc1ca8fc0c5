"""Source location tracking for error messages and zero-copy slicing.

Every AST node carries a SourceLocation. Besides the human-oriented
line/column pair, ``offset`` and ``end_offset`` delimit the node's span in
the (normalized) input buffer, so any node can be mapped back to the exact
slice of text it was built from.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and span lookup.

    All line/column positions are 1-indexed. ``offset``/``end_offset`` are
    0-indexed character offsets forming the half-open span
    ``source[offset:end_offset]``.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=1, offset=0, end_offset=5)
            >>> loc.slice("Hello, World")
            'Hello'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def slice(self, source: str) -> str:
        """Return the text of ``source`` this location spans."""
        return source[self.offset : self.end_offset]
