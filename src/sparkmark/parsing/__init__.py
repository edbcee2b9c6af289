"""Pipeline stages after line classification.

Stages, in dependency order:
- blocks: fold classified lines into raw blocks
- equations: swap $$...$$ and $...$ for placeholders
- inline: tokenize text into bold/italic/code/text runs
- document: splice transcoded equations back and assign ids
"""

from sparkmark.parsing.blocks import (
    AssemblerState,
    BlockKind,
    RawBlock,
    RawItem,
    assemble_blocks,
)
from sparkmark.parsing.document import build_document
from sparkmark.parsing.equations import EquationPlaceholder, extract_equations
from sparkmark.parsing.inline import InlineToken, RunKind, tokenize_inline

__all__ = [
    "AssemblerState",
    "BlockKind",
    "EquationPlaceholder",
    "InlineToken",
    "RawBlock",
    "RawItem",
    "RunKind",
    "assemble_blocks",
    "build_document",
    "extract_equations",
    "tokenize_inline",
]
