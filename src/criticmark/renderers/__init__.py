"""Renderers for annotation tokens.

- html: open/close tag rules registered with markdown-it's HTML renderer
"""

from criticmark.renderers.html import close_tag, make_render_rule, open_tag

__all__ = [
    "close_tag",
    "make_render_rule",
    "open_tag",
]
