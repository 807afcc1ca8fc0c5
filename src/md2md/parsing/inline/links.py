"""Link and image parsing for md2md parser.

Both constructs share one grammar after their opening delimiter:

    [text] ␠? (\\n [ \\t]*)? [identifier]     reference form (tried first)
    [text] ␠? ( destination "title"? )       inline form

Link text is balanced over ``[``/``]`` and parsed recursively for inline
markup. Image alt text is kept as the raw slice. Inline destinations are
balanced over ``(``/``)`` and may carry a trailing quoted title.
"""

from __future__ import annotations

import re

from md2md.nodes import Image, InlineTarget, Link, LinkTarget, RefTarget
from md2md.parsing.brackets import find_balanced_close
from md2md.parsing.charsets import HORIZONTAL_WHITESPACE, TITLE_QUOTES, WHITESPACE

# Pattern for whitespace normalization
_WHITESPACE_PATTERN = re.compile(r"\s+")


def _normalize_label(label: str) -> str:
    """Normalize a link reference label for matching.

    Label matching is case-insensitive and Unicode case fold equivalent.
    Runs of whitespace (including line endings) compare as a single space.

    Args:
        label: Raw label text

    Returns:
        Normalized label (case-folded, whitespace normalized)

    """
    return _WHITESPACE_PATTERN.sub(" ", label.strip()).casefold()


def _split_title(content: str) -> tuple[str, str | None]:
    """Split inline target content into destination and optional title.

    The content is stripped first. A title is present when the content ends
    with a quote character and the same quote also opens a later part of
    the content right after whitespace: ``url "title"``.

    Returns:
        (destination, title) where title is None when absent

    """
    content = content.strip(" \t\n\r\f\v")
    if len(content) < 3 or content[-1] not in TITLE_QUOTES:
        return content, None

    quote = content[-1]
    opener = content.find(quote, 1, len(content) - 1)
    while opener != -1 and content[opener - 1] not in WHITESPACE:
        opener = content.find(quote, opener + 1, len(content) - 1)
    if opener == -1:
        return content, None

    destination = content[:opener].rstrip(" \t\n\r\f\v")
    return destination, content[opener + 1 : -1]


class LinkParsingMixin:
    """Mixin for link and image parsing.

    Required Host Attributes:
        - _source: str
        - _max_nesting: int

    Required Host Methods:
        - _parse_inline(start, end) -> tuple[Inline, ...]
        - _location(start, end) -> SourceLocation

    """

    def _try_parse_link(self, pos: int, end: int) -> tuple[Link, int] | None:
        """Try to parse a link whose ``[`` is at pos.

        Returns (Link, new_position) or None if the text is not a link.
        """
        label_close = self._find_label_close(pos, end)
        if label_close is None:
            return None

        parsed = self._parse_link_target(label_close + 1, end)
        if parsed is None:
            return None

        target, title, new_pos = parsed
        children = self._parse_inline(pos + 1, label_close)
        return Link(
            location=self._location(pos, new_pos),
            children=children,
            target=target,
            title=title,
        ), new_pos

    def _try_parse_image(self, pos: int, end: int) -> tuple[Image, int] | None:
        """Try to parse an image whose ``!`` is at pos.

        Returns (Image, new_position) or None if the text is not an image.
        """
        label_close = self._find_label_close(pos + 1, end)
        if label_close is None:
            return None

        parsed = self._parse_link_target(label_close + 1, end)
        if parsed is None:
            return None

        target, title, new_pos = parsed
        return Image(
            location=self._location(pos, new_pos),
            alt=self._source[pos + 2 : label_close],
            target=target,
            title=title,
        ), new_pos

    def _find_label_close(self, pos: int, end: int) -> int | None:
        """Find the ``]`` closing the bracketed label opened at pos."""
        close = find_balanced_close(self._source, pos + 1, end, "[", "]", self._max_nesting)
        if close >= end:
            return None
        return close

    def _parse_link_target(
        self, pos: int, end: int
    ) -> tuple[LinkTarget, str | None, int] | None:
        """Parse what follows a label's ``]``: a reference or an inline target.

        Returns:
            (target, title, end_position) or None when neither form matches

        """
        source = self._source

        # One optional space between the label and the target
        if pos < end and source[pos] == " ":
            pos += 1

        # Reference form may continue on the next line
        ref_pos = pos
        if ref_pos < end and source[ref_pos] == "\n":
            ref_pos += 1
            while ref_pos < end and source[ref_pos] in HORIZONTAL_WHITESPACE:
                ref_pos += 1
        if ref_pos < end and source[ref_pos] == "[":
            ref_close = source.find("]", ref_pos + 1, end)
            if ref_close != -1:
                return RefTarget(identifier=source[ref_pos + 1 : ref_close]), None, ref_close + 1

        if pos < end and source[pos] == "(":
            paren_close = find_balanced_close(source, pos + 1, end, "(", ")", self._max_nesting)
            if paren_close < end:
                destination, title = _split_title(source[pos + 1 : paren_close])
                return InlineTarget(destination=destination), title, paren_close + 1

        return None
