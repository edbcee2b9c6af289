"""Code fence delimiter classifier mixin."""

from sparkmark.tokens import Line, LineRole

FENCE_MARKER = "```"


class FenceClassifierMixin:
    """Mixin providing code fence delimiter classification."""

    _fences_enabled: bool

    def _try_classify_fence(self, index: int, raw: str, trimmed: str) -> Line | None:
        """Try to classify a line as a fence delimiter.

        Any line whose trimmed text starts with three backticks opens or
        closes a fence; the remainder is the language hint.

        Args:
            index: 0-based line index
            raw: The raw line
            trimmed: The line with surrounding whitespace stripped

        Returns:
            Line if a fence delimiter, None otherwise.
        """
        if not self._fences_enabled or not trimmed.startswith(FENCE_MARKER):
            return None
        language = trimmed[len(FENCE_MARKER) :].strip()
        return Line(
            index=index,
            text=raw,
            role=LineRole.FENCE_DELIMITER,
            language=language,
        )
