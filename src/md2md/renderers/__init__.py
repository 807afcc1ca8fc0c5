"""md2md renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders AST to HTML using StringBuilder pattern
- TextRenderer: Renders AST back to canonical Markdown text

Thread Safety:
All renderers use a sink local to each render() call.
Safe for concurrent use from multiple threads.

"""

from md2md.renderers.html import HtmlRenderer
from md2md.renderers.protocol import ASTRenderer
from md2md.renderers.text import TextRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "TextRenderer"]
