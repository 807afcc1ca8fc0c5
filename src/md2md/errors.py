"""Exception classes for md2md.

Provides standardized exceptions for error handling throughout md2md.
"""

from __future__ import annotations


class Md2mdError(Exception):
    """Base exception for all md2md errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(Md2mdError):
    """Error during Markdown parsing.

    Raised only when the block segmenter or the inline span parser cannot
    make progress. Malformed Markdown never raises: it degrades to
    paragraph text.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        offset: int | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
            offset: Absolute character offset into the parsed buffer
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.offset = offset

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        suffix = f" (offset {offset})" if offset is not None else ""
        super().__init__(f"{location}{message}{suffix}")


class RenderError(Md2mdError):
    """Error during rendering.

    Raised when a renderer meets an object that is not a node it knows
    how to emit.
    """

    def __init__(self, node: object, renderer: str) -> None:
        self.node = node
        self.renderer = renderer
        super().__init__(f"{renderer} cannot render {type(node).__name__!s}")
