"""Composable sanitization policies for sparkmark documents.

The tree never contains markup, so sanitization here is about content a
host may not want to show: invisible Unicode used for spoofing, or node
kinds a reduced surface (digest emails, notification previews) cannot
display. Policies compose via the | operator.

Example:
    >>> from sparkmark import parse, sanitize
    >>> from sparkmark.sanitize import digest_safe
    >>> doc = parse("Total: $\\\\frac{1}{2}$\\n```\\ncode\\n```")
    >>> clean = sanitize(doc, policy=digest_safe)
"""

import dataclasses
import re
from collections.abc import Callable

from sparkmark.nodes import (
    Bold,
    Code,
    CodeBlock,
    Document,
    Equation,
    EquationForm,
    Italic,
    Node,
    Text,
)
from sparkmark.visitor import transform

# Zero-width and bidi override characters to strip (Trojan Source mitigation)
_NORMALIZE_UNICODE_PATTERN = re.compile(
    "[\u200b\u200c\u200d\u200e\u200f\u202a\u202b\u202c\u202d\u202e"
    "\u2066\u2067\u2068\u2069\ufeff]+"
)


class Policy:
    """Wrapper for Document -> Document transform, supports composition via |."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Document], Document]) -> None:
        self._fn = fn

    def __call__(self, doc: Document) -> Document:
        return self._fn(doc)

    def __or__(self, other: "Policy") -> "Policy":
        """Chain policies: (self | other)(doc) applies self then other."""

        def chained(doc: Document) -> Document:
            return other._fn(self._fn(doc))

        return Policy(chained)


def _clean(value: str) -> str:
    return _NORMALIZE_UNICODE_PATTERN.sub("", value)


def _normalize_unicode(doc: Document) -> Document:
    """Strip zero-width characters and bidi overrides from every displayed string.

    Covers run text, equation source and transcoding, and code block
    lines. Nothing else about a code block changes.
    """
    def fn(node: Node) -> Node | None:
        match node:
            case Text() | Bold() | Italic() | Code():
                if _NORMALIZE_UNICODE_PATTERN.search(node.content):
                    return dataclasses.replace(node, content=_clean(node.content))
            case Equation():
                if _NORMALIZE_UNICODE_PATTERN.search(node.source + node.transcoded):
                    return dataclasses.replace(
                        node,
                        source=_clean(node.source),
                        transcoded=_clean(node.transcoded),
                    )
            case CodeBlock():
                if any(_NORMALIZE_UNICODE_PATTERN.search(line) for line in node.raw_lines):
                    return dataclasses.replace(
                        node, raw_lines=tuple(_clean(line) for line in node.raw_lines)
                    )
        return node
    return transform(doc, fn)


def _strip_equations(doc: Document) -> Document:
    """Replace Equation runs with Text runs holding the equation as written."""
    def fn(node: Node) -> Node | None:
        if isinstance(node, Equation):
            delim = "$$" if node.form is EquationForm.BLOCK else "$"
            return Text(node_id=node.node_id, content=f"{delim}{node.source}{delim}")
        return node
    return transform(doc, fn)


def _strip_code_blocks(doc: Document) -> Document:
    """Remove CodeBlock nodes."""
    def fn(node: Node) -> Node | None:
        if isinstance(node, CodeBlock):
            return None
        return node
    return transform(doc, fn)


# Composable Policy instances (use with | operator)
normalize_unicode = Policy(_normalize_unicode)
strip_equations = Policy(_strip_equations)
strip_code_blocks = Policy(_strip_code_blocks)

# Pre-built policy sets
digest_safe: Policy = normalize_unicode | strip_equations | strip_code_blocks
chat_safe: Policy = normalize_unicode


def sanitize(doc: Document, *, policy: Policy | Callable[[Document], Document]) -> Document:
    """Apply a sanitization policy to a document.

    Args:
        doc: Document to sanitize.
        policy: Policy or callable Document -> Document.

    Returns:
        Sanitized document.
    """
    return policy(doc)
