"""
sparkmark — Markdown and equation rendering for untrusted chat text

Turns user- or operator-authored text (chat replies, inbox digests,
assistant responses) into a typed, immutable node tree. The tree never
contains markup: hosts draw each leaf through an escaping text primitive.

Pipeline (each stage consumes the previous one's output):
    classify -> assemble_blocks -> extract_equations -> tokenize_inline
    -> transcode -> build_document

Quick Start:
    >>> from sparkmark import render
    >>> blocks = render("# Hello **World**")
    >>> blocks[0].children
    (Text(node_id='b0.r0', content='Hello '), Bold(node_id='b0.r1', content='World'))

    >>> # Reduced profile for digest bodies
    >>> from sparkmark import Markdown
    >>> md = Markdown(equations=False, code_fences=False)
    >>> md("costs $5 or $6")[0].children
    (Text(node_id='b0.r0', content='costs $5 or $6'),)

Installation:
    pip install sparkmark              # zero runtime dependencies
    pip install sparkmark[test]        # + pytest, hypothesis
"""

from collections.abc import Iterable

from sparkmark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from sparkmark.errors import ConfigError, SerializationError, SparkmarkError
from sparkmark.lexer import Lexer, classify
from sparkmark.location import LineSpan
from sparkmark.nodes import (
    Blank,
    Block,
    Bold,
    Code,
    CodeBlock,
    Document,
    Equation,
    EquationForm,
    Heading,
    Inline,
    Italic,
    List,
    ListItem,
    Node,
    Paragraph,
    Rule,
    Text,
)
from sparkmark.parsing import (
    EquationPlaceholder,
    assemble_blocks,
    build_document,
    extract_equations,
    tokenize_inline,
)
from sparkmark.renderers.plain import PlainTextRenderer, render_plain
from sparkmark.sanitize import Policy, sanitize
from sparkmark.serialization import from_dict, from_json, to_dict, to_json
from sparkmark.text import extract_text
from sparkmark.tokens import Line, LineRole
from sparkmark.transcoder import transcode
from sparkmark.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(text: str, *, config: RenderConfig | None = None) -> Document:
    """Run the full pipeline and return the Document root.

    Args:
        text: Untrusted source text
        config: Config for this call (uses the active context config if None)

    Returns:
        Document whose children are the rendered blocks

    Raises:
        TypeError: If ``text`` is not a string. Every string is accepted.
    """
    if not isinstance(text, str):
        msg = f"render() expects str, got {type(text).__name__}"
        raise TypeError(msg)

    if config is None:
        return _run(text, get_render_config())
    with render_config_context(config):
        return _run(text, config)


def render(text: str, *, config: RenderConfig | None = None) -> tuple[Block, ...]:
    """Render text to an ordered sequence of block nodes.

    Total over strings: malformed fences, unterminated equations and
    stray delimiters all produce blocks, never exceptions.

    Args:
        text: Untrusted source text
        config: Config for this call (uses the active context config if None)

    Returns:
        Blocks in input order

    Example:
        >>> [type(b).__name__ for b in render("- one\\n- two\\n1. three")]
        ['List', 'List']
    """
    return parse(text, config=config).children


def _run(text: str, config: RenderConfig) -> Document:
    lines = list(Lexer(text, fences_enabled=config.code_fences_enabled).tokenize())
    raw_blocks = assemble_blocks(lines)
    return build_document(
        raw_blocks,
        line_count=len(lines),
        equations_enabled=config.equations_enabled,
        underscore_italic=config.underscore_italic_enabled,
    )


class Markdown:
    """High-level renderer holding an immutable config.

    Usage:
        >>> md = Markdown()
        >>> blocks = md("Area: $\\\\pi r^2$")
        >>> blocks[0].children[1].transcoded
        'π r²'

        >>> # Digest profile: no equations, no code fences, _underscore_ italics
        >>> digest = Markdown(equations=False, code_fences=False, underscore_italic=True)

    Thread Safety:
        The config is frozen and every call builds a fresh tree. Safe to
        share one instance across threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        equations: bool = True,
        code_fences: bool = True,
        underscore_italic: bool = False,
    ) -> None:
        self._config = RenderConfig(
            equations_enabled=equations,
            code_fences_enabled=code_fences,
            underscore_italic_enabled=underscore_italic,
        )

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, text: str) -> tuple[Block, ...]:
        """Render text to blocks."""
        return render(text, config=self._config)

    def parse(self, text: str) -> Document:
        """Render text to a Document root."""
        return parse(text, config=self._config)

    def render_many(self, texts: Iterable[str]) -> list[tuple[Block, ...]]:
        """Render several independent texts (e.g. a page of inbox messages)."""
        return [parse(text, config=self._config).children for text in texts]


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "render",
    "parse",
    "Markdown",
    # Pipeline stages
    "classify",
    "assemble_blocks",
    "extract_equations",
    "tokenize_inline",
    "transcode",
    "build_document",
    "Lexer",
    "Line",
    "LineRole",
    "EquationPlaceholder",
    # Block nodes
    "Block",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "List",
    "ListItem",
    "Rule",
    "Blank",
    # Inline runs
    "Inline",
    "Text",
    "Bold",
    "Italic",
    "Code",
    "Equation",
    "EquationForm",
    "Node",
    "LineSpan",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "SparkmarkError",
    "ConfigError",
    "SerializationError",
    # Tree utilities
    "BaseVisitor",
    "transform",
    "extract_text",
    "Policy",
    "sanitize",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Renderers
    "PlainTextRenderer",
    "render_plain",
]
