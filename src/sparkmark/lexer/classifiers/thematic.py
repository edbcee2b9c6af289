"""Thematic break classifier mixin."""

from sparkmark.tokens import Line, LineRole

MIN_RULE_LENGTH = 3


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    def _try_classify_rule(self, index: int, raw: str, trimmed: str) -> Line | None:
        """Try to classify a line as a rule.

        A rule is three or more ``-`` with nothing else on the line.
        Interior spaces (``- - -``) do not make a rule.
        """
        if len(trimmed) < MIN_RULE_LENGTH or trimmed.strip("-"):
            return None
        return Line(index=index, text=raw, role=LineRole.RULE)
