"""DocumentRenderer protocol — stable interface for flat-string renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this
protocol. ``PlainTextRenderer`` is the built-in implementation.

Example:
    from sparkmark.renderers.protocol import DocumentRenderer

    def digest_body(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from sparkmark.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a string."""
        ...
