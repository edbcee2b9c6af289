"""Equation extractor for sparkmark.

Finds ``$$...$$`` (block) and ``$...$`` (inline) equations in displayable
text and swaps each for an opaque placeholder, so the inline formatter
never sees equation source (a ``*`` inside ``$x*y$`` is not italics).

Placeholders are ``<marker><id><marker>`` where ``<marker>`` is a
private-use code point that does not occur anywhere in the input. Input
text can therefore never forge a placeholder.

Scanning rules:
- All block equations are resolved first, leftmost first.
- Inline equations are resolved in the text left between block equations.
- An unmatched ``$$`` leaves the rest of the text literal; nothing after
  it is treated as an equation.
- An unmatched ``$`` leaves the rest of its segment literal.
- A ``$`` preceded by a backslash neither opens nor closes an inline equation.
- Text that already holds every private-use code point has no free
  marker; its equations stay literal.

Thread Safety:
All functions are pure.

"""

from dataclasses import dataclass

from sparkmark.nodes import EquationForm
from sparkmark.utils.logger import get_logger

logger = get_logger(__name__)

BLOCK_DELIMITER = "$$"
INLINE_DELIMITER = "$"

_MARKER_RANGES = (range(0xE000, 0xF900), range(0xF0000, 0xFFFFE))


@dataclass(frozen=True, slots=True)
class EquationPlaceholder:
    """An extracted equation awaiting transcoding.

    Attributes:
        id: Position of the equation within its text (0-based)
        form: Block or inline
        source: Text between the delimiters, as written
        marker: Private-use character bracketing the placeholder

    """

    id: int
    form: EquationForm
    source: str
    marker: str

    @property
    def token(self) -> str:
        """The placeholder text standing in for the equation."""
        return f"{self.marker}{self.id}{self.marker}"

    @property
    def delimited_source(self) -> str:
        """The equation as written, delimiters included."""
        delim = BLOCK_DELIMITER if self.form is EquationForm.BLOCK else INLINE_DELIMITER
        return f"{delim}{self.source}{delim}"


def pick_marker(text: str) -> str | None:
    """Return a private-use character that does not occur in ``text``.

    Returns None when ``text`` already holds every private-use code point.
    """
    present = set(text)
    for code_points in _MARKER_RANGES:
        for cp in code_points:
            char = chr(cp)
            if char not in present:
                return char
    return None


def extract_equations(text: str) -> tuple[str, tuple[EquationPlaceholder, ...]]:
    """Replace equations in ``text`` with placeholders.

    Args:
        text: Displayable text of one block

    Returns:
        The text with placeholders, and the extracted equations in order.
    """
    if INLINE_DELIMITER not in text:
        return text, ()

    marker = pick_marker(text)
    if marker is None:
        logger.debug("No free placeholder character; equations left as text")
        return text, ()

    extractor = _Extractor(text, marker)
    extractor.run()
    return "".join(extractor.parts), tuple(extractor.equations)


class _Extractor:
    """Single-use scanner accumulating output parts and equations."""

    __slots__ = ("_text", "_marker", "parts", "equations")

    def __init__(self, text: str, marker: str) -> None:
        self._text = text
        self._marker = marker
        self.parts: list[str] = []
        self.equations: list[EquationPlaceholder] = []

    def run(self) -> None:
        text = self._text
        pos = 0
        while True:
            start = text.find(BLOCK_DELIMITER, pos)
            if start == -1:
                self._scan_inline(text[pos:])
                return
            end = text.find(BLOCK_DELIMITER, start + 2)
            if end == -1:
                logger.debug("Unterminated $$ at offset %d left as text", start)
                self._scan_inline(text[pos:start])
                self.parts.append(text[start:])
                return
            self._scan_inline(text[pos:start])
            if end == start + 2:
                # "$$$$" holds no equation
                self.parts.append(text[start : end + 2])
            else:
                self._add(EquationForm.BLOCK, text[start + 2 : end])
            pos = end + 2

    def _scan_inline(self, segment: str) -> None:
        pos = 0
        while True:
            start = _find_unescaped(segment, INLINE_DELIMITER, pos)
            if start == -1:
                break
            end = _find_unescaped(segment, INLINE_DELIMITER, start + 1)
            if end == -1:
                logger.debug("Unterminated $ left as text")
                break
            self.parts.append(segment[pos:start])
            self._add(EquationForm.INLINE, segment[start + 1 : end])
            pos = end + 1
        self.parts.append(segment[pos:])

    def _add(self, form: EquationForm, source: str) -> None:
        placeholder = EquationPlaceholder(
            id=len(self.equations),
            form=form,
            source=source,
            marker=self._marker,
        )
        self.equations.append(placeholder)
        self.parts.append(placeholder.token)


def _find_unescaped(text: str, char: str, start: int) -> int:
    """Find ``char`` at or after ``start`` not preceded by a backslash."""
    idx = text.find(char, start)
    while idx > 0 and text[idx - 1] == "\\":
        idx = text.find(char, idx + 1)
    return idx
