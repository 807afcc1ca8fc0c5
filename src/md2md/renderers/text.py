"""Markdown text renderer: re-emits canonical Markdown.

Each node is written back in the dialect's own surface syntax, so a
document built from canonical constructs renders back to its source.

Example:
    >>> from md2md import parse
    >>> from md2md.renderers.text import TextRenderer
    >>> TextRenderer().render(parse("Title\\n=====\\n\\n[a][b]"))
    'Title\\n=====\\n\\n[a][b]'
"""

from typing import TextIO

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
from md2md.stringbuilder import Sink, StreamWriter, StringBuilder

_SETEXT_UNDERLINE_CHARS = {1: "=", 2: "-"}


def _quote_title(title: str) -> str:
    if '"' in title:
        return f"'{title}'"
    return f'"{title}"'


def _render_target(target: LinkTarget, title: str | None, sb: Sink) -> None:
    match target:
        case RefTarget(identifier=identifier):
            sb.append("[").append(identifier).append("]")
        case InlineTarget(destination=destination):
            sb.append("(").append(destination)
            if title is not None:
                sb.append(" ").append(_quote_title(title))
            sb.append(")")
        case _:
            raise RenderError(target, "TextRenderer")


def render_inlines(inlines: tuple[Inline, ...], sb: Sink) -> None:
    """Write a sequence of inline nodes as Markdown source."""
    for inline in inlines:
        match inline:
            case Text():
                sb.append(inline.content)
            case SoftBreak():
                sb.append("\n")
            case CodeSpan():
                sb.append("`").append(inline.code).append("`")
            case Link():
                sb.append("[")
                render_inlines(inline.children, sb)
                sb.append("]")
                _render_target(inline.target, inline.title, sb)
            case Image():
                sb.append("![").append(inline.alt).append("]")
                _render_target(inline.target, inline.title, sb)
            case AutoLink():
                sb.append("<").append(inline.target).append(">")
            case _:
                raise RenderError(inline, "TextRenderer")


def inline_source(inline: Inline) -> str:
    """Markdown source text of a single inline node."""
    sb = StringBuilder()
    render_inlines((inline,), sb)
    return sb.build()


class TextRenderer:
    """Render AST back to canonical Markdown text.

    Thread Safety:
        Stateless. Safe to share one instance across threads.
    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document to a Markdown string."""
        sb = StringBuilder()
        self._render_document(node, sb)
        return sb.build()

    def write(self, node: Document, stream: TextIO) -> None:
        """Render document to a text stream, fragment by fragment."""
        self._render_document(node, StreamWriter(stream))

    def _render_document(self, node: Document, sb: Sink) -> None:
        if not isinstance(node, Document):
            raise RenderError(node, "TextRenderer")
        for child in node.children:
            self._render_block(child, sb)

    def _render_block(self, block: Block, sb: Sink) -> None:
        """Render a block node."""
        match block:
            case Separator():
                sb.append("\n" * block.count)
            case Heading(style="setext", level=1 | 2, level_len=int()):
                render_inlines(block.children, sb)
                sb.append("\n").append(_SETEXT_UNDERLINE_CHARS[block.level] * block.level_len)
            case Heading():
                sb.append("#" * block.level).append(" ")
                render_inlines(block.children, sb)
                # A trailing "#" would be read back as a closing sequence
                match block.children:
                    case (*_, Text(content=content)) if content.endswith("#"):
                        sb.append(" #")
            case Paragraph():
                render_inlines(block.children, sb)
            case _:
                raise RenderError(block, "TextRenderer")
