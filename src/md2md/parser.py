"""Recursive descent parser producing typed AST.

Works directly on the source buffer and builds typed AST nodes whose
locations are absolute offsets into it. Produces immutable (frozen)
dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `SourceNavigationMixin`: Cursor and location bookkeeping
- `InlineParsingMixin`: Inline spans (text, code, links, images, autolinks)
- `BlockParsingMixin`: Blocks (separators, headings, paragraphs)

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from md2md.config import ParseConfig, get_parse_config
from md2md.nodes import Block
from md2md.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    SourceNavigationMixin,
)
from md2md.parsing.blocks import SetextUnderline
from md2md.parsing.source_nav import compute_line_starts
from md2md.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    SourceNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for Markdown.

    Segments the buffer into blocks and each block into inline spans.

    Architecture:
        Uses mixin inheritance to separate concerns while maintaining
        a single entry point. Each mixin handles one aspect of the grammar:

        - `SourceNavigationMixin`: Cursor, line/column lookup
        - `InlineParsingMixin`: Text runs, code spans, links, images, etc.
        - `BlockParsingMixin`: Separators, setext/ATX headings, paragraphs

    Usage:
        >>> parser = Parser("# Hello\\n\\nWorld")
        >>> blocks = parser.parse()
        >>> blocks[0]
        Heading(level=1, children=(Text(content='Hello'),), ...)

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_pos",
        "_line_starts",
        "_max_nesting",
        # Setext underline search results, keyed by line start
        "_setext_memo",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text (normally already passed through cleanup())
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._line_starts = compute_line_starts(source)
        self._max_nesting = self._config.max_nesting
        self._setext_memo: dict[int, SetextUnderline | None] = {}

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> tuple[Block, ...]:
        """Parse source into AST blocks.

        Returns:
            Blocks whose locations are contiguous and cover the whole source

        Raises:
            ParseError: If the segmenter cannot make progress

        Thread Safety:
            Returns immutable AST (frozen dataclasses).
        """
        blocks: list[Block] = []
        while not self._at_end():
            blocks.append(self._parse_block())

        logger.debug(
            "Parsed %d blocks from %d characters%s",
            len(blocks),
            self._source_len,
            f" ({self._source_file})" if self._source_file else "",
        )
        return tuple(blocks)
