"""Literal-search scanner for annotation spans.

This is the single primitive behind both the preview's inline rule and the
navigation index. It never uses regular expressions: each candidate is an
opening ``{`` followed by two marker characters, and the close delimiter is
found with a plain substring search.

Matching rules:
- The first close delimiter after the opener wins. Nested same-kind
  patterns are NOT balanced, so ``{++a {++b++} c++}`` matches ``{++a {++b++}``
  and leaves `` c++}`` as literal text.
- Empty content is a valid match (``{++++}``).
- A substitution needs ``~>`` between its delimiters, otherwise it is rejected.
- An unterminated opener is not a match, and scanning has no side effects.

Complexity:
match_at() is O(n) in the remaining source for an unterminated pattern.
That is acceptable because it only runs at ``{`` characters.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from criticmark.catalog import CATALOG, AnnotationKind, PatternSpec


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A recognised annotation span.

    Attributes:
        kind: Annotation kind
        spans: Inner text; one item for simple kinds, (old, new) for substitution
        start: Offset of the opening ``{``
        end: Offset just past the closing delimiter

    """

    kind: AnnotationKind
    spans: tuple[str, ...]
    start: int
    end: int

    @property
    def inner_length(self) -> int:
        """Total length of the captured inner text."""
        return sum(len(span) for span in self.spans)


def match_at(
    source: str,
    pos: int,
    end: int | None = None,
    kinds: Sequence[PatternSpec] = CATALOG,
) -> MatchResult | None:
    """Try to match an annotation starting exactly at ``pos``.

    Args:
        source: Text buffer
        pos: Offset of a candidate ``{``
        end: Exclusive search bound (defaults to the end of source)
        kinds: Catalog entries to try, in priority order

    Returns:
        MatchResult, or None if no annotation starts at pos

    Example:
        >>> match_at("x {++y++}", 2)
        MatchResult(kind=<AnnotationKind.ADDITION: 'addition'>, spans=('y',), start=2, end=9)

    """
    if end is None:
        end = len(source)
    if pos + 3 > end or source[pos] != "{":
        return None

    marker = source[pos + 1 : pos + 3]
    for spec in kinds:
        if marker != spec.marker:
            continue

        close_pos = source.find(spec.close, pos + 3, end)
        if close_pos == -1:
            return None

        content = source[pos + 3 : close_pos]
        if spec.separator is None:
            spans: tuple[str, ...] = (content,)
        else:
            sep_pos = content.find(spec.separator)
            if sep_pos == -1:
                return None
            spans = (content[:sep_pos], content[sep_pos + len(spec.separator) :])

        return MatchResult(spec.kind, spans, pos, close_pos + len(spec.close))

    return None


def find_next(
    source: str,
    start: int = 0,
    kinds: Sequence[PatternSpec] = CATALOG,
) -> MatchResult | None:
    """Find the first annotation that starts at or after ``start``."""
    pos = source.find("{", start)
    while pos != -1:
        match = match_at(source, pos, kinds=kinds)
        if match is not None:
            return match
        pos = source.find("{", pos + 1)
    return None


def iter_matches(
    source: str,
    kinds: Sequence[PatternSpec] = CATALOG,
) -> Iterator[MatchResult]:
    """Yield successive non-overlapping annotations in document order."""
    pos = 0
    while True:
        match = find_next(source, pos, kinds)
        if match is None:
            return
        yield match
        pos = match.end


__all__ = [
    "MatchResult",
    "find_next",
    "iter_matches",
    "match_at",
]
