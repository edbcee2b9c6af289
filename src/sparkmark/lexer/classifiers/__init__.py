"""Line role classifiers for the sparkmark lexer.

Each classifier is a mixin that provides classification logic for
a specific line role. Classifiers are pure: they look at one line and
either return a classified Line or None.
"""

from sparkmark.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from sparkmark.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from sparkmark.lexer.classifiers.list import (
    ListClassifierMixin,
)
from sparkmark.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "ThematicClassifierMixin",
]
