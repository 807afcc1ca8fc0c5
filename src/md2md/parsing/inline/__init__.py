"""Inline parsing subsystem for md2md parser.

Provides mixins for parsing inline Markdown content:
- Plain text runs and soft breaks
- Code spans (`)
- Links and images, reference and inline forms
- Autolinks (<...>)

"""

from __future__ import annotations

from md2md.parsing.inline.core import InlineParsingCoreMixin
from md2md.parsing.inline.links import LinkParsingMixin
from md2md.parsing.inline.special import SpecialInlineMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    LinkParsingMixin,
    SpecialInlineMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _source: str
        - _source_file: str | None
        - _max_nesting: int

    """

    pass


__all__ = [
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "LinkParsingMixin",
    "SpecialInlineMixin",
]
