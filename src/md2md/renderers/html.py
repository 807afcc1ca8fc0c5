"""HTML renderer using StringBuilder pattern.

Renders typed AST to HTML with O(n) performance using StringBuilder, or
straight to a text stream via StreamWriter.

Thread Safety:
The renderer holds only read-only configuration (the reference table).
Multiple threads can safely share a single HtmlRenderer instance and call
render() concurrently without synchronization.

Reference Links:
``[text][id]`` and ``![alt][id]`` carry only an identifier. They resolve
through the ``references`` mapping given to the renderer; labels compare
case-insensitively with whitespace collapsed. A reference that does not
resolve is written as its (escaped) Markdown source.
"""

import html
from collections.abc import Mapping
from typing import TextIO, TypeAlias
from urllib.parse import quote as url_quote

from md2md.errors import RenderError
from md2md.nodes import (
    AutoLink,
    Block,
    CodeSpan,
    Document,
    Heading,
    Image,
    Inline,
    InlineTarget,
    Link,
    LinkTarget,
    Paragraph,
    RefTarget,
    Separator,
    SoftBreak,
    Text,
)
from md2md.parsing.inline.links import _normalize_label
from md2md.renderers.text import inline_source
from md2md.stringbuilder import Sink, StreamWriter, StringBuilder
from md2md.utils.logger import get_logger

logger = get_logger(__name__)

# A reference resolves to a URL, or to a (URL, title) pair
Reference: TypeAlias = str | tuple[str, str | None]


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes.
    Python's html.escape() escapes ' to &#x27; which is not required.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def _encode_url(url: str) -> str:
    """Encode URL for an href/src attribute.

    1. Decode HTML entities (e.g., &auml; → ä)
    2. Percent-encode special characters (spaces, backslashes, non-ASCII)

    Returns URL safe for href attribute (still needs html_escape for quotes).
    """
    decoded = html.unescape(url)
    # safe= characters that don't need encoding (per RFC 3986 + common URL chars)
    # Undecodable input bytes (surrogateescape) are percent-encoded as the raw bytes
    return url_quote(decoded, safe="/:?#[]@!$&'()*+,;=-_.~%", errors="surrogateescape")


def _title_attr(title: str | None) -> str:
    if not title:
        return ""
    # Decode HTML entities in title, then re-escape
    return f' title="{html_escape(html.unescape(title))}"'


class HtmlRenderer:
    """Render AST to HTML using StringBuilder pattern.

    O(n) rendering using StringBuilder for string accumulation.

    Usage:
        >>> from md2md import parse
        >>> renderer = HtmlRenderer()
        >>> renderer.render(parse("# Hello [World](https://example.com)"))
        '<h1>Hello <a href="https://example.com">World</a></h1>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_references",)

    def __init__(self, references: Mapping[str, Reference] | None = None) -> None:
        """Initialize renderer.

        Args:
            references: Optional reference table for ``[text][id]`` links,
                mapping a label to a URL or to a (URL, title) pair
        """
        resolved: dict[str, tuple[str, str | None]] = {}
        for label, value in (references or {}).items():
            key = _normalize_label(label)
            # First definition of a label wins
            if key in resolved:
                continue
            if isinstance(value, str):
                resolved[key] = (value, None)
            else:
                url, title = value
                resolved[key] = (url, title)
        self._references = resolved

    def render(self, node: Document) -> str:
        """Render document AST to HTML string.

        Args:
            node: Document AST root

        Returns:
            HTML string
        """
        sb = StringBuilder()
        self._render_document(node, sb)
        return sb.build()

    def write(self, node: Document, stream: TextIO) -> None:
        """Render document AST to a text stream.

        Fragments are written as they are produced. Write errors propagate
        and may leave partial output behind.
        """
        self._render_document(node, StreamWriter(stream))

    def _render_document(self, node: Document, sb: Sink) -> None:
        if not isinstance(node, Document):
            raise RenderError(node, "HtmlRenderer")
        for child in node.children:
            self._render_block(child, sb)

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: Sink) -> None:
        """Render a block node."""
        match block:
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(block.children, sb)
                sb.append(f"</h{block.level}>")
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.children, sb)
                sb.append("</p>")
            case Separator():
                sb.append("\n")
            case _:
                raise RenderError(block, "HtmlRenderer")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: Sink) -> None:
        """Render a sequence of inline nodes."""
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: Sink) -> None:
        """Render an inline node."""
        match inline:
            case Text():
                sb.append(html_escape(inline.content))
            case SoftBreak():
                sb.append("\n")
            case CodeSpan():
                sb.append("<code>")
                sb.append(html_escape(inline.code))
                sb.append("</code>")
            case Link():
                resolved = self._resolve(inline.target, inline.title)
                if resolved is None:
                    self._render_unresolved(inline, sb)
                    return
                url, title = resolved
                href = html_escape(_encode_url(url))
                sb.append(f'<a href="{href}"{_title_attr(title)}>')
                self._render_inlines(inline.children, sb)
                sb.append("</a>")
            case Image():
                resolved = self._resolve(inline.target, inline.title)
                if resolved is None:
                    self._render_unresolved(inline, sb)
                    return
                url, title = resolved
                src = html_escape(_encode_url(url))
                alt = html_escape(inline.alt)
                sb.append(f'<img src="{src}" alt="{alt}"{_title_attr(title)}>')
            case AutoLink():
                href = html_escape(_encode_url(inline.target))
                sb.append(f'<a href="{href}">{html_escape(inline.target)}</a>')
            case _:
                raise RenderError(inline, "HtmlRenderer")

    def _resolve(
        self, target: LinkTarget, title: str | None
    ) -> tuple[str, str | None] | None:
        """URL and title for a link target, or None if a reference is unknown."""
        match target:
            case InlineTarget(destination=destination):
                return destination, title
            case RefTarget(identifier=identifier):
                return self._references.get(_normalize_label(identifier))
            case _:
                raise RenderError(target, "HtmlRenderer")

    def _render_unresolved(self, inline: Link | Image, sb: Sink) -> None:
        logger.debug(
            "Unresolved reference %r at %s", inline.target.identifier, inline.location
        )
        sb.append(html_escape(inline_source(inline)))
