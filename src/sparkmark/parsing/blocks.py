"""Block assembler for sparkmark.

Folds the classified line stream into raw blocks: paragraphs, lists,
code blocks, headings, rules and blank spacers. Raw blocks still carry
unformatted text; equation extraction and inline formatting happen later.

The open paragraph/list/fence is an explicit AssemblerState value. Each
step takes a state and a line and returns the next state plus any blocks
that line closed. Pending lines are always a contiguous slice of the
input, so the state records only where the slice starts.

Thread Safety:
All functions are pure. States are frozen.

"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from sparkmark.location import LineSpan
from sparkmark.tokens import Line, LineRole
from sparkmark.utils.logger import get_logger

logger = get_logger(__name__)


class BlockKind(Enum):
    """Kind of an assembled raw block."""

    HEADING = auto()
    PARAGRAPH = auto()
    CODE = auto()
    LIST = auto()
    RULE = auto()
    BLANK = auto()


@dataclass(frozen=True, slots=True)
class RawItem:
    """List item before inline formatting."""

    span: LineSpan
    label: str | None
    text: str
    indent: int = 0


@dataclass(frozen=True, slots=True)
class RawBlock:
    """Block before equation extraction and inline formatting.

    Only the fields relevant to ``kind`` are populated.

    """

    kind: BlockKind
    span: LineSpan
    text: str = ""
    level: int = 0
    language: str | None = None
    raw_lines: tuple[str, ...] = ()
    ordered: bool = False
    items: tuple[RawItem, ...] = ()


class Mode(Enum):
    """What the assembler currently has open."""

    IDLE = auto()
    PARAGRAPH = auto()
    BULLET_LIST = auto()
    NUMBERED_LIST = auto()
    FENCE = auto()


@dataclass(frozen=True, slots=True)
class AssemblerState:
    """Assembler state between lines.

    Attributes:
        mode: What is open
        start: Position of the first pending line (the opening delimiter
            for a fence); meaningless when idle

    """

    mode: Mode = Mode.IDLE
    start: int = 0


IDLE = AssemblerState()

# Roles that open or extend a multi-line block. All other roles stand alone.
_MODE_FOR_ROLE: dict[LineRole, Mode] = {
    LineRole.PLAIN: Mode.PARAGRAPH,
    LineRole.BULLET_ITEM: Mode.BULLET_LIST,
    LineRole.NUMBERED_ITEM: Mode.NUMBERED_LIST,
    LineRole.FENCE_DELIMITER: Mode.FENCE,
}

_STANDALONE_KIND: dict[LineRole, BlockKind] = {
    LineRole.HEADING: BlockKind.HEADING,
    LineRole.RULE: BlockKind.RULE,
    LineRole.BLANK: BlockKind.BLANK,
}


def assemble_blocks(lines: Sequence[Line]) -> list[RawBlock]:
    """Fold classified lines into raw blocks in a single forward scan.

    Args:
        lines: Lines as produced by the lexer (positions match line indices)

    Returns:
        Raw blocks in first-line order.
    """
    blocks: list[RawBlock] = []
    state = IDLE
    for pos in range(len(lines)):
        state, emitted = step(state, lines, pos)
        blocks.extend(emitted)
    blocks.extend(finish(state, lines))
    return blocks


def step(
    state: AssemblerState, lines: Sequence[Line], pos: int
) -> tuple[AssemblerState, list[RawBlock]]:
    """Advance the assembler by one line.

    Returns:
        The next state and the blocks closed by this line.
    """
    line = lines[pos]

    if state.mode is Mode.FENCE:
        if line.role is LineRole.FENCE_DELIMITER:
            return IDLE, [_code_block(lines, state.start, pos + 1, closed=True)]
        return state, []

    target = _MODE_FOR_ROLE.get(line.role)
    if target is not None and target is state.mode and target is not Mode.FENCE:
        return state, []

    emitted = _close(state, lines, pos)
    if target is None:
        emitted.append(_standalone(line))
        return IDLE, emitted
    return AssemblerState(mode=target, start=pos), emitted


def finish(state: AssemblerState, lines: Sequence[Line]) -> list[RawBlock]:
    """Close whatever is still open at end of input."""
    if state.mode is Mode.FENCE:
        logger.debug(
            "Unterminated code fence opened at line %d; using rest of input",
            lines[state.start].index,
        )
        return [_code_block(lines, state.start, len(lines), closed=False)]
    return _close(state, lines, len(lines))


def _close(state: AssemblerState, lines: Sequence[Line], end: int) -> list[RawBlock]:
    """Emit the open paragraph or list covering ``lines[state.start:end]``."""
    match state.mode:
        case Mode.IDLE:
            return []
        case Mode.PARAGRAPH:
            group = lines[state.start : end]
            return [
                RawBlock(
                    kind=BlockKind.PARAGRAPH,
                    span=_span(group),
                    text="\n".join(line.content for line in group),
                )
            ]
        case Mode.BULLET_LIST | Mode.NUMBERED_LIST:
            group = lines[state.start : end]
            items = tuple(
                RawItem(
                    span=LineSpan.single(line.index),
                    label=line.label,
                    text=line.content,
                    indent=line.indent,
                )
                for line in group
            )
            return [
                RawBlock(
                    kind=BlockKind.LIST,
                    span=_span(group),
                    ordered=state.mode is Mode.NUMBERED_LIST,
                    items=items,
                )
            ]
        case Mode.FENCE:
            # Fences close only on a delimiter line or in finish()
            raise AssertionError("fence closed outside step/finish")


def _code_block(lines: Sequence[Line], start: int, end: int, *, closed: bool) -> RawBlock:
    """Build a code block from the opening delimiter at ``start`` up to ``end``.

    When ``closed`` the line at ``end - 1`` is the closing delimiter.
    """
    opener = lines[start]
    body_end = end - 1 if closed else end
    return RawBlock(
        kind=BlockKind.CODE,
        span=LineSpan(opener.index, lines[end - 1].index),
        language=opener.language or None,
        raw_lines=tuple(line.text for line in lines[start + 1 : body_end]),
    )


def _standalone(line: Line) -> RawBlock:
    kind = _STANDALONE_KIND[line.role]
    return RawBlock(
        kind=kind,
        span=LineSpan.single(line.index),
        text=line.content,
        level=line.level,
    )


def _span(group: Sequence[Line]) -> LineSpan:
    return LineSpan(group[0].index, group[-1].index)
