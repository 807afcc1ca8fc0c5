"""ASTRenderer protocol: stable interface for AST renderers.

Any renderer that implements ``render(node) -> str`` and
``write(node, stream)`` conforms to this protocol. The built-in
``HtmlRenderer`` and ``TextRenderer`` are the reference implementations.

Example:
    from md2md.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, TextIO

from md2md.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for AST renderers.

    Implementations must accept a Document and either return the rendered
    string or write it to a text stream.

    """

    def render(self, node: Document) -> str:
        """Render a Document AST to a string.

        Args:
            node: The document AST to render.

        Returns:
            Rendered string output.

        """
        ...

    def write(self, node: Document, stream: TextIO) -> None:
        """Render a Document AST straight to a text stream.

        Args:
            node: The document AST to render.
            stream: Writable text stream. Write errors propagate.

        """
        ...
