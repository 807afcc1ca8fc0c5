"""Typed AST nodes for md2md.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Separator
│   ├── Heading
│   └── Paragraph
└── Inline (inline elements)
    ├── Text
    ├── SoftBreak
    ├── CodeSpan
    ├── Link
    ├── Image
    └── AutoLink

Every node's location spans the exact slice of the parsed buffer it was
built from: ``node.location.slice(source)`` returns that text. Text fields
are substrings of the buffer; the only synthesized value is the
``mailto:`` target of an email autolink.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from md2md.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and span lookup.

    """

    location: SourceLocation


# =============================================================================
# Link targets
# =============================================================================


@dataclass(frozen=True, slots=True)
class RefTarget:
    """Reference-style target: ``[text][identifier]``.

    The identifier is resolved at render time against a reference table.
    """

    identifier: str


@dataclass(frozen=True, slots=True)
class InlineTarget:
    """Inline-style target: ``[text](destination)``."""

    destination: str


# PEP 695 type alias for link and image targets
LinkTarget: TypeAlias = RefTarget | InlineTarget


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    The most common inline node, representing literal text.

    """

    content: str


@dataclass(frozen=True, slots=True)
class SoftBreak(Node):
    """Soft line break.

    A newline plus any whitespace that follows it, collapsed to one break.
    Rendered as a single newline by both renderers.

    """


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    The body may contain newlines.

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url "title") or [text][ref]
    HTML: <a href="url" title="title">text</a>

    """

    children: tuple[Inline, ...]
    target: LinkTarget
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url "title") or ![alt][ref]
    HTML: <img src="url" alt="alt" title="title">

    The alt text is a raw slice; it is not parsed for markup.

    """

    alt: str
    target: LinkTarget
    title: str | None = None


@dataclass(frozen=True, slots=True)
class AutoLink(Node):
    """Link whose display text equals its target.

    Markdown: <https://example.com> or <user@example.com>
    HTML: <a href="target">target</a>

    Email addresses are normalized to ``mailto:local@domain``.

    """

    target: str


# PEP 695 type alias for inline elements
Inline: TypeAlias = Text | SoftBreak | CodeSpan | Link | Image | AutoLink


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Separator(Node):
    """Run of consecutive newline characters between blocks.

    Text: ``count`` newlines. HTML: a single newline.

    """

    count: int


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX or setext heading.

    Markdown: # Heading or Heading\\n======
    HTML: <h1>Heading</h1>

    Setext headings keep the length of their underline in ``level_len`` so
    the text renderer can reproduce it; ATX headings leave it None.
    Setext only yields levels 1 (``=``) and 2 (``-``).

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]
    style: Literal["atx", "setext"] = "atx"
    level_len: int | None = None


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: Text up to a blank line or a line starting a heading
    HTML: <p>text</p>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document. Block locations are
    contiguous and together cover the whole parsed buffer.

    """

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
Block: TypeAlias = Separator | Heading | Paragraph


__all__ = [
    "AutoLink",
    "Block",
    "CodeSpan",
    "Document",
    "Heading",
    "Image",
    "Inline",
    "InlineTarget",
    "Link",
    "LinkTarget",
    "Node",
    "Paragraph",
    "RefTarget",
    "Separator",
    "SoftBreak",
    "Text",
]
