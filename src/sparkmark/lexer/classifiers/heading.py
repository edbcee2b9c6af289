"""ATX heading classifier mixin."""

from sparkmark.tokens import Line, LineRole

MAX_HEADING_LEVEL = 3


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _try_classify_heading(self, index: int, raw: str, trimmed: str) -> Line | None:
        """Try to classify a line as a heading.

        Headings are 1-3 ``#`` characters followed by whitespace. Four or
        more leading ``#`` make an ordinary line.

        Returns:
            Line if valid heading, None otherwise.
        """
        level = 0
        while level < len(trimmed) and trimmed[level] == "#":
            level += 1
            if level > MAX_HEADING_LEVEL:
                return None

        if level == 0 or level >= len(trimmed) or not trimmed[level].isspace():
            return None

        indent = len(raw) - len(raw.lstrip())
        return Line(
            index=index,
            text=raw,
            role=LineRole.HEADING,
            content=raw[indent + level + 1 :],
            level=level,
        )
