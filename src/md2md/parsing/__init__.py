"""Parsing subsystem for md2md Markdown parser.

Provides mixin classes for modular parsing functionality:
- `SourceNavigationMixin`: Cursor and source location bookkeeping
- `InlineParsingMixin`: Inline content (text, code spans, links, autolinks)
- `BlockParsingMixin`: Block-level content (separators, headings, paragraphs)

Architecture:
The parser uses a mixin-based design for separation of concerns.
Each mixin handles one aspect of the Markdown grammar.

Example:
    >>> from md2md.parsing import (
    ...     SourceNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(SourceNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from md2md.parsing.blocks import BlockParsingMixin
from md2md.parsing.brackets import find_balanced_close
from md2md.parsing.inline import InlineParsingMixin
from md2md.parsing.protocols import ParserHost
from md2md.parsing.source_nav import SourceNavigationMixin

__all__ = [
    "SourceNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
    "ParserHost",
    "find_balanced_close",
]
