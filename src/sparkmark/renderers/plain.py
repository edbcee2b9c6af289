"""Plain-text renderer — readable text with no markup.

Used for surfaces that cannot show formatting: plain-text email digests,
push notifications, screen-reader summaries. Formatting markers are
dropped, equations appear as their Unicode transcoding, list markers and
code indentation are kept so structure stays legible.

Example:
    >>> from sparkmark import parse
    >>> from sparkmark.renderers.plain import render_plain
    >>> render_plain(parse("# Week 3\\n- read **ch. 2**\\n- solve $x^2$"))
    'Week 3\\n• read ch. 2\\n• solve x²\\n'
"""

from sparkmark.nodes import (
    Blank,
    Block,
    Bold,
    Code,
    CodeBlock,
    Document,
    Equation,
    Heading,
    Inline,
    Italic,
    List,
    Paragraph,
    Rule,
    Text,
)
from sparkmark.stringbuilder import StringBuilder

BULLET = "• "
CODE_INDENT = "    "
RULE_TEXT = "-" * 24
MAX_ITEM_INDENT = 6


class PlainTextRenderer:
    """Render a Document to plain text."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document to plain text."""
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Heading() | Paragraph():
                self._render_inlines(block.children, sb)
                sb.append_line()
            case CodeBlock():
                for line in block.raw_lines:
                    sb.append(CODE_INDENT).append_line(line)
            case List():
                for item in block.items:
                    sb.append(" " * min(item.indent, MAX_ITEM_INDENT))
                    sb.append(f"{item.label}. " if block.ordered else BULLET)
                    self._render_inlines(item.children, sb)
                    sb.append_line()
            case Rule():
                sb.append_line(RULE_TEXT)
            case Blank():
                sb.append_line()

    def _render_inlines(self, runs: tuple[Inline, ...], sb: StringBuilder) -> None:
        for run in runs:
            match run:
                case Text() | Bold() | Italic() | Code():
                    sb.append(run.content)
                case Equation():
                    sb.append(run.transcoded)


def render_plain(doc: Document) -> str:
    """Render a Document to plain text."""
    return PlainTextRenderer().render(doc)
