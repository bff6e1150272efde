"""Navigation index: jump to the next or previous annotation.

Independent of the render pipeline. Each call scans the whole document again,
so the index always reflects the current text; documents are small enough
that no caching is done.

The scan uses the same literal matcher as the preview (scanner.match_at), run
once per kind. Because kinds are scanned independently, an annotation nested
inside a different kind (``{++a {>>note<<} b++}``) yields two ranges. The
combined list is sorted by start offset.

Unlike the preview, navigation also sees multi-line annotations that open
mid-line.

Example:
    >>> doc = "one {++two++} three {--four--}"
    >>> [r.kind.value for r in find_all(doc)]
    ['addition', 'deletion']
    >>> next_range(doc, 0).start_offset
    4
    >>> prev_range(doc, 0).start_offset  # wraps to the last
    20

"""

from __future__ import annotations

from criticmark.catalog import CATALOG
from criticmark.location import LineIndex, NavigationRange
from criticmark.scanner import iter_matches


def find_all(document: str) -> list[NavigationRange]:
    """Find every annotation in a document, ordered by start offset.

    Args:
        document: Full document text

    Returns:
        NavigationRange list sorted by start offset

    """
    index = LineIndex(document)
    ranges: list[NavigationRange] = []
    for spec in CATALOG:
        for match in iter_matches(document, (spec,)):
            ranges.append(
                NavigationRange(
                    start=index.position_at(match.start),
                    end=index.position_at(match.end),
                    start_offset=match.start,
                    end_offset=match.end,
                    kind=match.kind,
                )
            )
    ranges.sort(key=lambda r: r.start_offset)
    return ranges


def next_range(document: str, offset: int) -> NavigationRange | None:
    """Return the first annotation starting strictly after ``offset``.

    Wraps around to the first annotation when none follows. Returns None
    if the document contains no annotations.
    """
    ranges = find_all(document)
    if not ranges:
        return None
    for r in ranges:
        if r.start_offset > offset:
            return r
    return ranges[0]


def prev_range(document: str, offset: int) -> NavigationRange | None:
    """Return the last annotation starting strictly before ``offset``.

    Wraps around to the last annotation when none precedes. Returns None
    if the document contains no annotations.
    """
    ranges = find_all(document)
    if not ranges:
        return None
    for r in reversed(ranges):
        if r.start_offset < offset:
            return r
    return ranges[-1]


__all__ = [
    "find_all",
    "next_range",
    "prev_range",
]
