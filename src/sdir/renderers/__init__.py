"""Renderers turning a built tree into text.

Both renderers are plain functions over the same frozen tree and visit its nodes
in the same pre-order.
"""

from . import json_renderer, text_renderer

__all__ = ["json_renderer", "text_renderer"]
