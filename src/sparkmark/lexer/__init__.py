"""Line classifier package for sparkmark.

Exports:
    Lexer: Line-oriented lexer
    classify: Convenience function returning a list of Lines
"""

from sparkmark.lexer.core import Lexer, classify

__all__ = ["Lexer", "classify"]
