"""Document assembler for sparkmark.

Turns raw blocks into the final node tree: runs each displayable text
through the equation extractor and inline formatter, splices transcoded
equations back in, and assigns order-based ids.

Splicing keeps runs flat. A bold or italic run holding a placeholder is
cut into same-kind runs around an Equation run. Inline code is literal,
so a placeholder inside a code run is put back as its ``$...$`` source.

Ids:
- blocks: ``b0``, ``b1``, ...
- list items: ``b3.i0``, ``b3.i1``, ...
- runs: ``<owner id>.r0``, ``<owner id>.r1``, ...

Thread Safety:
All functions are pure.

"""

from collections.abc import Iterator, Sequence

from sparkmark.location import LineSpan
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
    ListItem,
    Paragraph,
    Rule,
    Text,
)
from sparkmark.parsing.blocks import BlockKind, RawBlock, RawItem
from sparkmark.parsing.equations import EquationPlaceholder, extract_equations
from sparkmark.parsing.inline import InlineToken, RunKind, tokenize_inline
from sparkmark.transcoder import transcode

DOCUMENT_ID = "doc"

_RUN_TYPES: dict[RunKind, type[Text | Bold | Italic | Code]] = {
    RunKind.TEXT: Text,
    RunKind.BOLD: Bold,
    RunKind.ITALIC: Italic,
    RunKind.CODE: Code,
}


def build_document(
    raw_blocks: Sequence[RawBlock],
    *,
    line_count: int,
    equations_enabled: bool = True,
    underscore_italic: bool = False,
) -> Document:
    """Assemble the final document from raw blocks.

    Args:
        raw_blocks: Output of the block assembler
        line_count: Number of input lines (for the document span)
        equations_enabled: Run equation extraction on displayable text
        underscore_italic: Treat ``_..._`` as italic

    Returns:
        Document whose children are the blocks in input order.
    """
    assembler = _InlineAssembler(equations_enabled, underscore_italic)
    children = tuple(
        assembler.block(raw, f"b{n}") for n, raw in enumerate(raw_blocks)
    )
    return Document(
        node_id=DOCUMENT_ID,
        span=LineSpan(0, line_count - 1),
        children=children,
    )


class _InlineAssembler:
    __slots__ = ("_equations_enabled", "_underscore_italic")

    def __init__(self, equations_enabled: bool, underscore_italic: bool) -> None:
        self._equations_enabled = equations_enabled
        self._underscore_italic = underscore_italic

    def block(self, raw: RawBlock, node_id: str) -> Block:
        match raw.kind:
            case BlockKind.HEADING:
                return Heading(
                    node_id=node_id,
                    span=raw.span,
                    level=raw.level,
                    children=self.runs(raw.text, node_id),
                )
            case BlockKind.PARAGRAPH:
                return Paragraph(
                    node_id=node_id,
                    span=raw.span,
                    children=self.runs(raw.text, node_id),
                )
            case BlockKind.CODE:
                return CodeBlock(
                    node_id=node_id,
                    span=raw.span,
                    language=raw.language,
                    raw_lines=raw.raw_lines,
                )
            case BlockKind.LIST:
                items = tuple(
                    self.item(item, f"{node_id}.i{k}") for k, item in enumerate(raw.items)
                )
                return List(node_id=node_id, span=raw.span, ordered=raw.ordered, items=items)
            case BlockKind.RULE:
                return Rule(node_id=node_id, span=raw.span)
            case BlockKind.BLANK:
                return Blank(node_id=node_id, span=raw.span)

    def item(self, raw: RawItem, node_id: str) -> ListItem:
        return ListItem(
            node_id=node_id,
            span=raw.span,
            label=raw.label,
            children=self.runs(raw.text, node_id),
            indent=raw.indent,
        )

    def runs(self, text: str, owner_id: str) -> tuple[Inline, ...]:
        """Format one block's text into runs with ids under ``owner_id``."""
        if self._equations_enabled:
            text, equations = extract_equations(text)
        else:
            equations = ()

        pieces: list[tuple[type[Inline], tuple]] = []
        for token in tokenize_inline(text, underscore_italic=self._underscore_italic):
            pieces.extend(_splice(token, equations))

        return tuple(
            cls(f"{owner_id}.r{k}", *fields) for k, (cls, fields) in enumerate(pieces)
        )


def _splice(
    token: InlineToken,
    equations: Sequence[EquationPlaceholder],
) -> list[tuple[type[Inline], tuple]]:
    """Resolve placeholders inside one token.

    Returns (node class, positional fields after node_id) pairs.
    """
    run_type = _RUN_TYPES[token.kind]
    if not equations or equations[0].marker not in token.content:
        return [(run_type, (token.content,))]

    # Placeholders are marker + id + marker and the marker occurs nowhere
    # else, so splitting on it alternates text and equation ids.
    parts = token.content.split(equations[0].marker)

    if token.kind is RunKind.CODE:
        restored = "".join(
            equations[int(part)].delimited_source if odd else part
            for odd, part in _alternate(parts)
        )
        return [(Code, (restored,))]

    pieces: list[tuple[type[Inline], tuple]] = []
    for odd, part in _alternate(parts):
        if odd:
            eq = equations[int(part)]
            pieces.append((Equation, (eq.form, eq.source, transcode(eq.source))))
        elif part:
            pieces.append((run_type, (part,)))
    return pieces


def _alternate(parts: list[str]) -> Iterator[tuple[bool, str]]:
    for i, part in enumerate(parts):
        yield i % 2 == 1, part
