"""Inline formatter for sparkmark.

Tokenizes block text (with equations already replaced by placeholders)
into flat runs: text, bold, italic and inline code. Runs never nest.

At each step the earliest-starting match among the patterns wins:

- bold ``**...**``
- code ```...```
- italic ``*...*`` where neither delimiter touches another ``*``
- italic ``_..._`` under the same rule for ``_`` (only when enabled;
  the digest profile turns it on)

Matches starting at the same index are ranked bold > code > italic, so a
``**`` is never half-consumed as italic. Empty matches (``****``, ``````)
are not matches. Unterminated delimiters stay in the text.

Complexity:
Each pattern caches its next candidate and is only re-searched once the
scan position passes that candidate's start. Every search resumes from
the scan position, so each pattern walks the text a constant number of
times and the pass is linear.

Thread Safety:
All functions are pure.

"""

from collections.abc import Callable
from enum import Enum, auto
from typing import NamedTuple


class RunKind(Enum):
    """Kind of an inline run before equation splicing."""

    TEXT = auto()
    BOLD = auto()
    CODE = auto()
    ITALIC = auto()


class InlineToken(NamedTuple):
    """A formatted span of text."""

    kind: RunKind
    content: str


class _Match(NamedTuple):
    start: int
    end: int
    kind: RunKind
    content: str


BOLD_DELIMITER = "**"
CODE_DELIMITER = "`"
ITALIC_DELIMITER = "*"
UNDERSCORE_DELIMITER = "_"


def _find_bold(text: str, pos: int) -> _Match | None:
    search = pos
    while True:
        start = text.find(BOLD_DELIMITER, search)
        if start == -1:
            return None
        end = text.find(BOLD_DELIMITER, start + 2)
        if end == -1:
            return None
        if end > start + 2:
            return _Match(start, end + 2, RunKind.BOLD, text[start + 2 : end])
        search = start + 1


def _find_code(text: str, pos: int) -> _Match | None:
    search = pos
    while True:
        start = text.find(CODE_DELIMITER, search)
        if start == -1:
            return None
        end = text.find(CODE_DELIMITER, start + 1)
        if end == -1:
            return None
        if end > start + 1:
            return _Match(start, end + 1, RunKind.CODE, text[start + 1 : end])
        search = start + 1


def _find_single(text: str, char: str, pos: int) -> int:
    """Find ``char`` at or after ``pos`` with no ``char`` on either side."""
    idx = text.find(char, pos)
    last = len(text) - 1
    while idx != -1:
        before = idx > 0 and text[idx - 1] == char
        after = idx < last and text[idx + 1] == char
        if not before and not after:
            return idx
        idx = text.find(char, idx + 1)
    return -1


def _find_lone_pair(text: str, char: str, pos: int) -> _Match | None:
    start = _find_single(text, char, pos)
    if start == -1:
        return None
    end = _find_single(text, char, start + 1)
    if end == -1:
        return None
    return _Match(start, end + 1, RunKind.ITALIC, text[start + 1 : end])


def _find_italic(text: str, pos: int) -> _Match | None:
    return _find_lone_pair(text, ITALIC_DELIMITER, pos)


def _find_underscore_italic(text: str, pos: int) -> _Match | None:
    return _find_lone_pair(text, UNDERSCORE_DELIMITER, pos)


type _Finder = Callable[[str, int], _Match | None]

# Priority order for matches that start at the same index
_FINDERS: tuple[_Finder, ...] = (_find_bold, _find_code, _find_italic)
_FINDERS_WITH_UNDERSCORE: tuple[_Finder, ...] = (*_FINDERS, _find_underscore_italic)


def tokenize_inline(text: str, *, underscore_italic: bool = False) -> list[InlineToken]:
    """Split ``text`` into typed runs.

    Args:
        text: Block text, equations already replaced by placeholders
        underscore_italic: Also treat ``_..._`` as italic

    Returns:
        Runs in order. Concatenating their contents gives ``text`` with
        the matched delimiters removed.

    Example:
        >>> tokenize_inline("a **b** `c`")
        [InlineToken(kind=<RunKind.TEXT: 1>, content='a '), ...]
    """
    finders = _FINDERS_WITH_UNDERSCORE if underscore_italic else _FINDERS
    tokens: list[InlineToken] = []
    text_len = len(text)
    pos = 0

    # Per-finder cache: a pending match, or None once the finder is exhausted.
    # A finder with no match from pos has none from any later position.
    pending: list[_Match | None] = [finder(text, 0) for finder in finders]

    while pos < text_len:
        best: _Match | None = None
        for i, finder in enumerate(finders):
            candidate = pending[i]
            if candidate is None:
                continue
            if candidate.start < pos:
                candidate = pending[i] = finder(text, pos)
                if candidate is None:
                    continue
            if best is None or candidate.start < best.start:
                best = candidate

        if best is None:
            break
        if best.start > pos:
            tokens.append(InlineToken(RunKind.TEXT, text[pos : best.start]))
        tokens.append(InlineToken(best.kind, best.content))
        pos = best.end

    if pos < text_len:
        tokens.append(InlineToken(RunKind.TEXT, text[pos:]))
    return tokens
