"""Line and LineRole definitions for the sparkmark lexer.

The lexer produces one Line per physical input line, tagged with its
block-level role. The block assembler consumes the resulting list.

Thread Safety:
Line is frozen (immutable) and safe to share across threads.
LineRole is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineRole(Enum):
    """Block-level role of a single physical line.

    Roles are derived from one line's content alone; the classifier
    never looks at neighbouring lines.

    """

    HEADING = auto()  # #, ##, ###
    BULLET_ITEM = auto()  # - item, * item, • item
    NUMBERED_ITEM = auto()  # 1. item
    FENCE_DELIMITER = auto()  # ```lang
    RULE = auto()  # ---
    BLANK = auto()
    PLAIN = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """A classified physical line.

    Attributes:
        index: 0-based line index in the input
        text: The raw line, byte-identical to the input
        role: Block-level role
        content: Text after the block marker (whole raw line for PLAIN)
        level: Heading level 1-3 (0 for other roles)
        label: Literal number text of a numbered item
        language: Fence info string ("" when absent)
        indent: Leading whitespace characters before a list marker

    """

    index: int
    text: str
    role: LineRole
    content: str = ""
    level: int = 0
    label: str | None = None
    language: str | None = None
    indent: int = 0

    def __repr__(self) -> str:
        return f"Line({self.role.name}, {self.text!r}, {self.index})"
