"""Renderers turning sparkmark documents into text for non-tree hosts.

The engine's primary output is the node tree itself; renderers here are
conveniences for hosts that need a flat string. None of them emit markup.
"""

from sparkmark.renderers.plain import PlainTextRenderer, render_plain
from sparkmark.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "PlainTextRenderer", "render_plain"]
