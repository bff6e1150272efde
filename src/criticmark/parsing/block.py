"""Block rule that keeps multi-line annotations in one paragraph.

markdown-it splits paragraphs at blank lines, so an annotation like

    {++first paragraph

    second paragraph++}

would otherwise reach the inline rule as two fragments, neither of which
contains both delimiters. This rule runs before ``heading`` and, when a line
starts with an opening delimiter whose close delimiter lies on a later line,
claims every line up to and including the closing one as a single paragraph.
The delimiter-level split happens later, when the inline rule scans that
paragraph's content.

Limitation:
Only lines that START with an opening delimiter (after indentation) are
checked. A multi-line annotation that opens mid-line is left to the ordinary
paragraph rule and renders fragmented; navigation still finds it.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from criticmark.catalog import spec_for_opener
from criticmark.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it.rules_block import StateBlock

    from criticmark.config import MarkupConfig

logger = get_logger(__name__)

BlockRule = Callable[["StateBlock", int, int, bool], bool]


def closing_line(state: StateBlock, start_line: int, end_line: int, pattern_end: int) -> int:
    """Return the line index just past the line containing ``pattern_end``."""
    next_line = start_line
    while next_line < end_line:
        if state.eMarks[next_line] >= pattern_end:
            return next_line + 1
        next_line += 1
    return next_line


def within_container(state: StateBlock, start_line: int, next_line: int) -> bool:
    """Return False if a non-blank line after start_line is outdented past the container."""
    for line in range(start_line + 1, next_line):
        if state.isEmpty(line):
            continue
        if state.sCount[line] < state.blkIndent:
            return False
    return True


def make_block_rule(config: MarkupConfig) -> BlockRule:
    """Create the multi-line block rule bound to a configuration.

    Args:
        config: Plugin configuration (used for log context)

    Returns:
        A markdown-it block rule ``(state, start_line, end_line, silent) -> bool``

    """

    def annotation_block(state: StateBlock, start_line: int, end_line: int, silent: bool) -> bool:
        pos = state.bMarks[start_line] + state.tShift[start_line]
        maximum = state.eMarks[start_line]

        if pos + 3 > maximum:
            return False

        spec = spec_for_opener(state.src[pos : pos + 3])
        if spec is None:
            return False

        close_pos = state.src.find(spec.close, pos + 3)
        if close_pos == -1:
            return False

        pattern_end = close_pos + len(spec.close)
        if "\n" not in state.src[pos:pattern_end]:
            # Single-line pattern; the inline rule handles it
            return False

        if pattern_end > state.eMarks[end_line - 1]:
            # Close delimiter lies outside the current container
            return False

        next_line = closing_line(state, start_line, end_line, pattern_end)
        if not within_container(state, start_line, next_line):
            return False

        if silent:
            return True

        logger.debug(
            "%s: claimed %s annotation on lines %d-%d",
            config.namespace,
            spec.kind.value,
            start_line,
            next_line - 1,
        )

        token = state.push("paragraph_open", "p", 1)
        token.map = [start_line, next_line]

        token = state.push("inline", "", 0)
        token.content = state.getLines(start_line, next_line, state.blkIndent, False).strip()
        token.map = [start_line, next_line]
        token.children = []

        state.push("paragraph_close", "p", -1)

        state.line = next_line
        return True

    return annotation_block


__all__ = [
    "closing_line",
    "make_block_rule",
    "within_container",
]
