"""List item classifier mixin."""

from sparkmark.tokens import Line, LineRole

BULLET_MARKERS = ("- ", "* ", "• ")


class ListClassifierMixin:
    """Mixin providing bullet and numbered list item classification.

    Item content is taken from the raw line, so whitespace after the
    marker and at the end of the line reaches the inline formatter
    unchanged. Leading indentation is recorded on the Line.
    """

    def _try_classify_bullet(self, index: int, raw: str, trimmed: str) -> Line | None:
        """Try to classify a line as a bullet item (``- x``, ``* x``)."""
        if not trimmed.startswith(BULLET_MARKERS):
            return None
        indent = len(raw) - len(raw.lstrip())
        return Line(
            index=index,
            text=raw,
            role=LineRole.BULLET_ITEM,
            content=raw[indent + 2 :],
            indent=indent,
        )

    def _try_classify_numbered(self, index: int, raw: str, trimmed: str) -> Line | None:
        """Try to classify a line as a numbered item (``12. x``).

        The digits are kept verbatim as the item label; lists are never
        renumbered.
        """
        pos = 0
        while pos < len(trimmed) and trimmed[pos].isascii() and trimmed[pos].isdigit():
            pos += 1

        if pos == 0 or pos + 1 >= len(trimmed):
            return None
        if trimmed[pos] != "." or not trimmed[pos + 1].isspace():
            return None

        indent = len(raw) - len(raw.lstrip())
        return Line(
            index=index,
            text=raw,
            role=LineRole.NUMBERED_ITEM,
            content=raw[indent + pos + 1 :].lstrip(),
            label=trimmed[:pos],
            indent=indent,
        )
