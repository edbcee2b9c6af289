"""Extract plain text from sparkmark nodes.

Used for previews, notification snippets, search indexing and for
checking that rendering never invents or drops characters.

Example:
    >>> from sparkmark import parse, extract_text
    >>> doc = parse("# Hello **World** $\\\\pi$")
    >>> extract_text(doc.children[0])
    'Hello World π'
"""

from sparkmark.nodes import (
    Blank,
    Bold,
    Code,
    CodeBlock,
    Document,
    Equation,
    Heading,
    Italic,
    List,
    ListItem,
    Node,
    Paragraph,
    Rule,
    Text,
)


def extract_text(node: Node, *, equation_source: bool = False) -> str:
    """Extract plain text from any node.

    Runs contribute their content. Equations contribute their transcoded
    text, or their source when ``equation_source`` is set. Sibling blocks
    and list items are joined with newlines.

    Args:
        node: Any node (block or run).
        equation_source: Use equation source instead of transcoded text.

    Returns:
        Concatenated plain text from the node and its descendants.

    """
    match node:
        case (
            Text(content=content)
            | Bold(content=content)
            | Italic(content=content)
            | Code(content=content)
        ):
            return content
        case Equation():
            return node.source if equation_source else node.transcoded
        case CodeBlock():
            return node.code
        case Heading() | Paragraph() | ListItem():
            return "".join(
                extract_text(c, equation_source=equation_source) for c in node.children
            )
        case List():
            return "\n".join(
                extract_text(item, equation_source=equation_source) for item in node.items
            )
        case Document():
            return "\n".join(
                extract_text(c, equation_source=equation_source) for c in node.children
            )
        case Rule() | Blank():
            return ""
        case _:
            return ""
