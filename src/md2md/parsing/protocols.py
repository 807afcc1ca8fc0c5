"""Protocols defining the parser mixin contracts.

These protocols formalize the implicit contracts between parser mixins.
Each mixin documents "Required Host Attributes/Methods" in its docstring;
this module turns those requirements into type-checkable Protocol classes.

Usage:
    Mixin methods that call across mixin boundaries can annotate `self`
    as the protocol they require::

        def _parse_paragraph(self: ParserHost) -> Paragraph:
            end = self._find_paragraph_end(self._pos)  # type-checked
            ...

Thread Safety:
    Protocols are purely structural; no runtime overhead.
"""

from typing import Protocol, runtime_checkable

from md2md.location import SourceLocation
from md2md.nodes import Block, Heading, Inline


@runtime_checkable
class SourceNavHost(Protocol):
    """Contract for cursor and location bookkeeping.

    Provided by: SourceNavigationMixin
    Required by: BlockParsingCoreMixin, HeadingParsingMixin, InlineParsingCoreMixin
    """

    _source: str
    _source_len: int
    _source_file: str | None
    _pos: int

    def _at_end(self) -> bool: ...
    def _line_end(self, offset: int) -> int: ...
    def _line_col(self, offset: int) -> tuple[int, int]: ...
    def _location(self, start: int, end: int) -> SourceLocation: ...


@runtime_checkable
class InlineParsingHost(Protocol):
    """Contract for inline content parsing.

    Provided by: InlineParsingMixin (composed from core + links + special)
    Required by: BlockParsingCoreMixin, HeadingParsingMixin, LinkParsingMixin
    """

    def _parse_inline(self, start: int, end: int) -> tuple[Inline, ...]: ...


@runtime_checkable
class BlockParsingHost(Protocol):
    """Contract for block-level parsing.

    Provided by: BlockParsingMixin (composed from core + heading)
    Required by: Parser.parse
    """

    def _parse_block(self) -> Block: ...
    def _try_parse_heading(self) -> Heading | None: ...


@runtime_checkable
class ParserHost(SourceNavHost, InlineParsingHost, BlockParsingHost, Protocol):
    """Full parser contract: everything the composed Parser provides."""

    _max_nesting: int
