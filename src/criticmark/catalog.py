"""Pattern catalog for the five CriticMarkup annotation kinds.

The catalog is a static, read-only table. Its order is the scanner's
priority order: addition, deletion, substitution, comment, highlight.

Syntax:
    {++added++}          → <ins>
    {--deleted--}        → <del>
    {~~old~>new~~}       → <span> wrapping <del>old</del><ins>new</ins>
    {>>comment<<}        → <span>
    {==highlighted==}    → <mark>

Thread Safety:
PatternSpec is frozen and the catalog is a tuple, so it is safe to share
across any number of concurrent renders.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AnnotationKind(Enum):
    """The five recognised annotation kinds.

    Values double as the suffix of CSS classes and token type names.
    """

    ADDITION = "addition"
    DELETION = "deletion"
    SUBSTITUTION = "substitution"
    COMMENT = "comment"
    HIGHLIGHT = "highlight"


@dataclass(frozen=True, slots=True)
class PatternSpec:
    """Delimiters and output tag for one annotation kind.

    Attributes:
        kind: Annotation kind this entry describes
        open: Three-character opening delimiter
        close: Three-character closing delimiter
        html_tag: Tag used for the wrapper element
        separator: Internal separator (substitution only)

    """

    kind: AnnotationKind
    open: str
    close: str
    html_tag: str
    separator: str | None = None

    @property
    def marker(self) -> str:
        """The two characters following ``{`` that identify this kind."""
        return self.open[1:]


SUBSTITUTION_SEPARATOR = "~>"

ADDITION = PatternSpec(AnnotationKind.ADDITION, "{++", "++}", "ins")
DELETION = PatternSpec(AnnotationKind.DELETION, "{--", "--}", "del")
SUBSTITUTION = PatternSpec(
    AnnotationKind.SUBSTITUTION, "{~~", "~~}", "span", separator=SUBSTITUTION_SEPARATOR
)
COMMENT = PatternSpec(AnnotationKind.COMMENT, "{>>", "<<}", "span")
HIGHLIGHT = PatternSpec(AnnotationKind.HIGHLIGHT, "{==", "==}", "mark")

# Priority order used by the scanner
CATALOG: tuple[PatternSpec, ...] = (ADDITION, DELETION, SUBSTITUTION, COMMENT, HIGHLIGHT)

OPEN_DELIMITERS: frozenset[str] = frozenset(spec.open for spec in CATALOG)

_BY_KIND: dict[AnnotationKind, PatternSpec] = {spec.kind: spec for spec in CATALOG}
_BY_OPENER: dict[str, PatternSpec] = {spec.open: spec for spec in CATALOG}


def spec_for(kind: AnnotationKind) -> PatternSpec:
    """Return the catalog entry for a kind."""
    return _BY_KIND[kind]


def spec_for_opener(opener: str) -> PatternSpec | None:
    """Return the entry whose opening delimiter equals ``opener``, if any.

    Args:
        opener: Candidate delimiter (normally the first three characters of a line)

    Returns:
        Matching PatternSpec, or None

    Example:
        >>> spec_for_opener("{==").kind
        <AnnotationKind.HIGHLIGHT: 'highlight'>
        >>> spec_for_opener("{{{") is None
        True

    """
    return _BY_OPENER.get(opener)


__all__ = [
    "ADDITION",
    "AnnotationKind",
    "CATALOG",
    "COMMENT",
    "DELETION",
    "HIGHLIGHT",
    "OPEN_DELIMITERS",
    "PatternSpec",
    "SUBSTITUTION",
    "SUBSTITUTION_SEPARATOR",
    "spec_for",
    "spec_for_opener",
]
