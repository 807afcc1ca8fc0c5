"""Block parsing subsystem for md2md parser.

Provides mixins for parsing block-level Markdown content:
- Separators (runs of blank lines)
- Headings (setext and ATX)
- Paragraphs

"""

from __future__ import annotations

from md2md.parsing.blocks.core import BlockParsingCoreMixin
from md2md.parsing.blocks.heading import HeadingParsingMixin, SetextUnderline


class BlockParsingMixin(
    BlockParsingCoreMixin,
    HeadingParsingMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _source_file: str | None
        - _pos: int
        - _setext_memo: dict[int, SetextUnderline | None]

    """

    pass


__all__ = [
    "BlockParsingMixin",
    "BlockParsingCoreMixin",
    "HeadingParsingMixin",
    "SetextUnderline",
]
