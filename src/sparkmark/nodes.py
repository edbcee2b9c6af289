"""Typed document nodes for sparkmark.

All nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Every string inside a node is data. Nothing here is markup; hosts must
insert each leaf through an escaping text primitive.

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── List
│   ├── ListItem
│   ├── Rule
│   └── Blank
└── Inline (runs, never nested)
    ├── Text
    ├── Bold
    ├── Italic
    ├── Code
    └── Equation

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum

from sparkmark.location import LineSpan

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes.

    ``node_id`` is derived from document order only, so identical input
    always yields identical ids and hosts can diff successive renders.

    """

    node_id: str


# =============================================================================
# Inline Runs
# =============================================================================


class EquationForm(Enum):
    """Display form of an equation."""

    BLOCK = "block"  # $$...$$
    INLINE = "inline"  # $...$


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content."""

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text.

    Markdown: **text**

    """

    content: str


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text.

    Markdown: *text*

    """

    content: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code.

    Markdown: `code`

    """

    content: str


@dataclass(frozen=True, slots=True)
class Equation(Node):
    """Equation with its Unicode approximation.

    Markdown: $x^2$ (inline) or $$x^2$$ (block)

    Attributes:
        form: Block or inline display
        source: LaTeX-style source between the delimiters, as written
        transcoded: Unicode approximation of ``source``

    """

    form: EquationForm
    source: str
    transcoded: str


type Inline = Text | Bold | Italic | Code | Equation


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading, level 1-3.

    Markdown: # Heading

    """

    span: LineSpan
    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Run of consecutive plain lines.

    Line breaks between member lines stay inside the run text as ``\\n``.

    """

    span: LineSpan
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block.

    ``raw_lines`` are the source lines between the fences, untouched:
    no equation extraction, no inline formatting, no escaping.

    """

    span: LineSpan
    language: str | None
    raw_lines: tuple[str, ...]

    @property
    def code(self) -> str:
        """The block's lines joined with newlines."""
        return "\n".join(self.raw_lines)


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """Single list item.

    ``label`` is the literal number text of a numbered item, None for bullets.
    ``indent`` counts the whitespace characters before the item marker.

    """

    span: LineSpan
    label: str | None
    children: tuple[Inline, ...]
    indent: int = 0


@dataclass(frozen=True, slots=True)
class List(Node):
    """Run of consecutive items sharing the same orderedness."""

    span: LineSpan
    ordered: bool
    items: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class Rule(Node):
    """Thematic break.

    Markdown: ---

    """

    span: LineSpan


@dataclass(frozen=True, slots=True)
class Blank(Node):
    """Blank-line spacer.

    Blank lines end the open paragraph or list and are kept as
    spacing markers rather than dropped.

    """

    span: LineSpan


type Block = Heading | Paragraph | CodeBlock | List | Rule | Blank


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a rendered document."""

    span: LineSpan
    children: tuple[Block, ...]
