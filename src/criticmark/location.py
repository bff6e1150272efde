"""Document positions for navigation ranges.

Provides Position/NavigationRange dataclasses and a LineIndex that maps
absolute offsets to (line, character) pairs.

All positions are 0-indexed, matching editor conventions.

Thread Safety:
Position and NavigationRange are frozen (immutable). A LineIndex is built
per document and never mutated after construction.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from criticmark.catalog import AnnotationKind


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (line, character) position in a document.

    Ordered by line, then character.

    Examples:
        >>> Position(1, 4) < Position(2, 0)
        True
        >>> str(Position(0, 3))
        '1:4'

    """

    line: int
    character: int

    def __str__(self) -> str:
        """Format as 1-indexed ``line:column`` for messages."""
        return f"{self.line + 1}:{self.character + 1}"


@dataclass(frozen=True, slots=True)
class NavigationRange:
    """One annotation found by a full-document scan.

    Attributes:
        start: Position of the opening ``{``
        end: Position just past the closing delimiter
        start_offset: Absolute offset of start
        end_offset: Absolute offset of end
        kind: Annotation kind

    """

    start: Position
    end: Position
    start_offset: int
    end_offset: int
    kind: AnnotationKind

    def text(self, document: str) -> str:
        """Return the raw annotation text, delimiters included."""
        return document[self.start_offset : self.end_offset]


class LineIndex:
    """Offset → Position lookup for one document.

    Usage:
        >>> index = LineIndex("ab\\ncd")
        >>> index.position_at(3)
        Position(line=1, character=0)

    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, document: str) -> None:
        starts = [0]
        pos = document.find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = document.find("\n", pos + 1)
        self._line_starts = starts
        self._length = len(document)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Convert an absolute offset to a Position.

        Offsets are clamped to ``[0, len(document)]``.
        """
        offset = max(0, min(offset, self._length))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Convert a Position back to an absolute offset (clamped)."""
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return self._length
        line_start = self._line_starts[position.line]
        if position.line + 1 < len(self._line_starts):
            line_end = self._line_starts[position.line + 1] - 1
        else:
            line_end = self._length
        return line_start + max(0, min(position.character, line_end - line_start))


__all__ = [
    "LineIndex",
    "NavigationRange",
    "Position",
]
