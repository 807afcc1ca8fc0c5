"""
md2md: PHP Markdown Extra Extended parser and renderer.

Parses a Markdown document into a typed, immutable AST (separators,
setext/ATX headings, paragraphs; text, soft breaks, code spans, links,
images, autolinks) and renders it back to canonical Markdown or to HTML.
Zero runtime dependencies.

Quick Start:
    >>> from md2md import cleanup, parse, render
    >>> doc = parse(cleanup("Hello, World!\\n============\\n"))
    >>> render(doc)
    '<h1>Hello, World!</h1>\\n'
    >>> render(doc, "markdown")
    'Hello, World!\\n============\\n'

    >>> # Or use the high-level Markdown class
    >>> from md2md import Markdown
    >>> md = Markdown(references={"home": "https://example.com"})
    >>> md("[Home][home]")
    '<p><a href="https://example.com">Home</a></p>'

Streaming Output:
    >>> import sys
    >>> render_html(parse("# Hi"), sys.stdout)
    <h1>Hi</h1>
"""

from collections.abc import Iterable, Mapping
from typing import Literal, TextIO, TypeAlias

from md2md.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from md2md.errors import Md2mdError, ParseError, RenderError
from md2md.location import SourceLocation
from md2md.normalize import cleanup, detab
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
    Node,
    Paragraph,
    RefTarget,
    Separator,
    SoftBreak,
    Text,
)
from md2md.parser import Parser
from md2md.renderers.html import HtmlRenderer, Reference
from md2md.renderers.protocol import ASTRenderer
from md2md.renderers.text import TextRenderer
from md2md.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"

OutputFormat: TypeAlias = Literal["html", "markdown"]

OUTPUT_FORMATS: tuple[str, ...] = ("html", "markdown")


def _build_document(source: str, source_file: str | None) -> Document:
    """Run the parser over source and wrap its blocks in a Document."""
    parser = Parser(source, source_file=source_file)
    blocks = parser.parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    return Document(location=loc, children=blocks)


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse Markdown source into a typed AST.

    The source is parsed as given; pass it through cleanup() first when it
    may contain tabs, carriage returns or a byte-order mark.

    Args:
        source: Markdown source text
        source_file: Optional source file path for error messages
        config: Configuration for this call only (defaults to the active
            context configuration)

    Returns:
        Document AST root node

    Raises:
        ParseError: If the parser cannot make progress (internal error)

    Example:
        >>> doc = parse("#Hello, World!\\n")
        >>> doc.children[0]
        Heading(level=1, ...)
    """
    if config is None:
        return _build_document(source, source_file)
    with parse_config_context(config):
        return _build_document(source, source_file)


def render(
    doc: Document,
    format: OutputFormat = "html",
    *,
    references: Mapping[str, Reference] | None = None,
) -> str:
    """Render an AST Document to HTML or Markdown text.

    Args:
        doc: Document AST to render
        format: "html" or "markdown"
        references: Reference table for ``[text][id]`` links (HTML only)

    Returns:
        Rendered string

    Raises:
        ValueError: If format is not a known output format
    """
    return _renderer_for(format, references).render(doc)


def render_text(doc: Document, sink: TextIO) -> None:
    """Write ``doc`` as canonical Markdown to a text stream.

    I/O errors propagate; output written before the error stays written.
    """
    TextRenderer().write(doc, sink)


def render_html(
    doc: Document,
    sink: TextIO,
    *,
    references: Mapping[str, Reference] | None = None,
) -> None:
    """Write ``doc`` as HTML to a text stream.

    I/O errors propagate; output written before the error stays written.
    """
    HtmlRenderer(references=references).write(doc, sink)


def convert(
    source: str,
    format: OutputFormat = "html",
    *,
    tab_width: int | None = None,
    references: Mapping[str, Reference] | None = None,
) -> str:
    """Normalize, parse and render in one call.

    Args:
        source: Raw Markdown text
        format: "html" or "markdown"
        tab_width: Tab stop width for cleanup() (defaults to the active config)
        references: Reference table for ``[text][id]`` links (HTML only)

    Returns:
        Rendered string
    """
    if tab_width is None:
        tab_width = get_parse_config().tab_width
    return render(parse(cleanup(source, tab_width)), format, references=references)


def _renderer_for(
    format: str, references: Mapping[str, Reference] | None
) -> ASTRenderer:
    match format:
        case "html":
            return HtmlRenderer(references=references)
        case "markdown":
            return TextRenderer()
        case _:
            msg = f"Unknown output format {format!r}; expected one of {OUTPUT_FORMATS}"
            raise ValueError(msg)


class Markdown:
    """High-level Markdown processor combining cleanup, parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello <https://example.com>")
        '<h1>Hello <a href="https://example.com">https://example.com</a></h1>'

        >>> # Access the AST
        >>> doc = md.parse("Heading\\n-------")
        >>> doc.children[0].level
        2

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_html")

    def __init__(
        self,
        *,
        tab_width: int = 4,
        max_nesting: int = 32,
        references: Mapping[str, Reference] | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            tab_width: Tab stop width used when normalizing input
            max_nesting: Deepest bracket/parenthesis nesting to balance
            references: Reference table for ``[text][id]`` links
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(tab_width=tab_width, max_nesting=max_nesting)
        self._html = HtmlRenderer(references=references)

    def __call__(self, source: str) -> str:
        """Normalize, parse and render Markdown to HTML in one call."""
        return self._html.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Normalize and parse Markdown source into AST.

        Thread Safety:
            Sets config via ContextVar (thread-local). Safe for concurrent use.
        """
        return parse(
            cleanup(source, self._config.tab_width),
            source_file=source_file,
            config=self._config,
        )

    def parse_many(self, sources: Iterable[str]) -> list[Document]:
        """Parse multiple Markdown sources into AST documents.

        Sets config once, parses all, restores once.

        Example:
            >>> md = Markdown()
            >>> docs = md.parse_many(["# Doc 1", "# Doc 2", "# Doc 3"])
        """
        tab_width = self._config.tab_width
        with parse_config_context(self._config):
            return [_build_document(cleanup(source, tab_width), None) for source in sources]

    def render(self, doc: Document, format: OutputFormat = "html") -> str:
        """Render AST to HTML (with this processor's references) or Markdown."""
        if format == "html":
            return self._html.render(doc)
        return _renderer_for(format, None).render(doc)


__all__ = [
    # High-level API
    "parse",
    "render",
    "render_text",
    "render_html",
    "convert",
    "cleanup",
    "detab",
    "Markdown",
    "OUTPUT_FORMATS",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Low-level
    "Parser",
    "HtmlRenderer",
    "TextRenderer",
    "ASTRenderer",
    "SourceLocation",
    # Errors
    "Md2mdError",
    "ParseError",
    "RenderError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # AST nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Separator",
    "Heading",
    "Paragraph",
    "Text",
    "SoftBreak",
    "CodeSpan",
    "Link",
    "Image",
    "AutoLink",
    "LinkTarget",
    "RefTarget",
    "InlineTarget",
]
