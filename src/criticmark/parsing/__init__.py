"""markdown-it rules for annotation parsing.

- inline: the ``{``-triggered inline rule and content re-entry
- block: the line-start multi-line guard
"""

from criticmark.parsing.block import make_block_rule
from criticmark.parsing.inline import add_inline_content, make_inline_rule

__all__ = [
    "add_inline_content",
    "make_block_rule",
    "make_inline_rule",
]
