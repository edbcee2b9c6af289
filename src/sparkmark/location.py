"""Line span tracking for diagnostics and testing.

Every block node is attributable to a contiguous range of input lines.
LineSpan records that range so hosts and tests can trace a node back to
the source text it came from.

Thread Safety:
LineSpan is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Inclusive range of 0-based input line indices.

    Attributes:
        start: Index of the first line belonging to the node
        end: Index of the last line belonging to the node

    Examples:
        >>> span = LineSpan(2, 4)
        >>> str(span)
        '2-4'
        >>> span.line_count
        3

    """

    start: int
    end: int

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"

    @property
    def line_count(self) -> int:
        return self.end - self.start + 1

    @classmethod
    def single(cls, index: int) -> LineSpan:
        """Span covering exactly one line."""
        return cls(start=index, end=index)
