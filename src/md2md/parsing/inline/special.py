"""Code span and autolink parsing for md2md parser.

Handles:
- Code spans: `code` (body runs to the next backtick, may span lines)
- Autolinks: <https://example.com>, <user@example.com>, <mailto:user@example.com>
"""

from __future__ import annotations

import re

from md2md.nodes import AutoLink, CodeSpan
from md2md.parsing.charsets import AUTOLINK_SCHEMES

# Email autolink: optional mailto: prefix, local part up to the first @, domain up to >
_EMAIL_AUTOLINK_RE = re.compile(
    r"<(?:mailto:)?([^@>]+)@([^>]+)>",
    re.IGNORECASE,
)

# URL autolink: fixed scheme set, then anything but quotes, angle brackets, line breaks
_URL_AUTOLINK_RE = re.compile(
    r"<((?:" + "|".join(AUTOLINK_SCHEMES) + r"):[^'\"<>\r\n\t\v\f]+)>",
    re.IGNORECASE,
)


class SpecialInlineMixin:
    """Mixin for code span and autolink parsing.

    Required Host Attributes:
        - _source: str

    Required Host Methods:
        - _location(start, end) -> SourceLocation

    """

    def _try_parse_code_span(self, pos: int, end: int) -> tuple[CodeSpan, int] | None:
        """Try to parse a code span whose opening backtick is at pos.

        The body is everything up to the next backtick and must not be
        empty. Returns (CodeSpan, new_position) or None.
        """
        source = self._source
        close_pos = source.find("`", pos + 1, end)
        if close_pos == -1 or close_pos == pos + 1:
            return None
        return CodeSpan(
            location=self._location(pos, close_pos + 1),
            code=source[pos + 1 : close_pos],
        ), close_pos + 1

    def _try_parse_autolink(self, pos: int, end: int) -> tuple[AutoLink, int] | None:
        """Try to parse an autolink whose ``<`` is at pos.

        Email addresses are tried first: the local part runs to the first
        ``@`` and the domain to the closing ``>``. They are normalized to
        ``mailto:local@domain``; URLs keep their text verbatim.
        Returns (AutoLink, new_position) or None.
        """
        source = self._source

        email_match = None
        close_pos = source.find(">", pos + 1, end)
        at_pos = source.find("@", pos + 1, close_pos) if close_pos != -1 else -1
        # Only run the regex when it is certain to match
        if at_pos > pos + 1 and close_pos > at_pos + 1:
            email_match = _EMAIL_AUTOLINK_RE.match(source, pos, close_pos + 1)
        if email_match:
            local, domain = email_match.groups()
            new_pos = email_match.end()
            return AutoLink(
                location=self._location(pos, new_pos),
                target=f"mailto:{local}@{domain}",
            ), new_pos

        url_match = _URL_AUTOLINK_RE.match(source, pos, end)
        if url_match:
            new_pos = url_match.end()
            return AutoLink(
                location=self._location(pos, new_pos),
                target=url_match.group(1),
            ), new_pos

        return None
