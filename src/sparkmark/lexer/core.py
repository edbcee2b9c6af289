"""Line classifier for sparkmark.

Splits input into physical lines and tags each with its block-level role.
Classification looks at one line at a time: no lookahead, no lookbehind,
no regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from sparkmark.config import get_render_config
from sparkmark.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
)
from sparkmark.tokens import Line, LineRole


class Lexer(
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ThematicClassifierMixin,
    ListClassifierMixin,
):
    """Line-oriented lexer.

    Each line is tried against the classifiers in fixed priority order,
    first match wins:

    1. fence delimiter
    2. heading
    3. rule
    4. bullet item
    5. numbered item
    6. blank
    7. plain

    Usage:
        >>> for line in Lexer("# Hi\\n\\nthere").tokenize():
        ...     print(line)
        Line(HEADING, '# Hi', 0)
        Line(BLANK, '', 1)
        Line(PLAIN, 'there', 2)

    """

    __slots__ = ("_source", "_fences_enabled")

    def __init__(self, source: str, *, fences_enabled: bool | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Raw input text
            fences_enabled: Override for fence recognition (defaults to the
                active RenderConfig)
        """
        self._source = source
        if fences_enabled is None:
            fences_enabled = get_render_config().code_fences_enabled
        self._fences_enabled = fences_enabled

    def tokenize(self) -> Iterator[Line]:
        """Yield one classified Line per physical line.

        The empty string has no lines. Otherwise lines are the result of
        splitting on ``\\n``, so a trailing newline yields a final blank line.
        """
        if not self._source:
            return
        for index, raw in enumerate(self._source.split("\n")):
            yield self._classify_line(index, raw)

    def _classify_line(self, index: int, raw: str) -> Line:
        trimmed = raw.strip()
        line = (
            self._try_classify_fence(index, raw, trimmed)
            or self._try_classify_heading(index, raw, trimmed)
            or self._try_classify_rule(index, raw, trimmed)
            or self._try_classify_bullet(index, raw, trimmed)
            or self._try_classify_numbered(index, raw, trimmed)
        )
        if line is not None:
            return line
        if not trimmed:
            return Line(index=index, text=raw, role=LineRole.BLANK)
        return Line(index=index, text=raw, role=LineRole.PLAIN, content=raw)


def classify(raw: str) -> list[Line]:
    """Classify every line of ``raw``. Pure; never fails."""
    return list(Lexer(raw).tokenize())
