"""Wrapper token tagging for annotation tokens.

Every token the inline rule pushes for an annotation wrapper carries a
``meta`` dict with its AnnotationKind and WrapperPart. The renderer dispatches
on these tags rather than on token-type strings; the type names only exist
because markdown-it looks up render rules by them.

Token type naming:
    {prefix}_{kind}_open / {prefix}_{kind}_close
    {prefix}_substitution_old_open / ..._old_close
    {prefix}_substitution_new_open / ..._new_close

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any

from criticmark.catalog import CATALOG, AnnotationKind, spec_for

if TYPE_CHECKING:
    from markdown_it.token import Token


class WrapperPart(Enum):
    """Which wrapper a token belongs to.

    ANNOTATION is the outer wrapper of any kind. OLD and NEW are the
    deletion/addition halves nested inside a substitution.
    """

    ANNOTATION = "annotation"
    OLD = "old"
    NEW = "new"


def token_type(prefix: str, kind: AnnotationKind, part: WrapperPart, nesting: int) -> str:
    """Build the markdown-it token type name for a wrapper token.

    Example:
        >>> token_type("criticmarkup", AnnotationKind.ADDITION, WrapperPart.ANNOTATION, 1)
        'criticmarkup_addition_open'
        >>> token_type("mdmarkup", AnnotationKind.SUBSTITUTION, WrapperPart.NEW, -1)
        'mdmarkup_substitution_new_close'
    """
    suffix = "open" if nesting > 0 else "close"
    if part is WrapperPart.ANNOTATION:
        return f"{prefix}_{kind.value}_{suffix}"
    return f"{prefix}_{kind.value}_{part.value}_{suffix}"


def wrapper_element(kind: AnnotationKind, part: WrapperPart) -> tuple[str, AnnotationKind]:
    """Return the HTML tag and the kind whose CSS class a wrapper uses.

    Substitution halves borrow the deletion and addition elements, so
    ``{~~a~>b~~}`` renders its old text exactly like ``{--a--}``.
    """
    match part:
        case WrapperPart.ANNOTATION:
            return spec_for(kind).html_tag, kind
        case WrapperPart.OLD:
            return spec_for(AnnotationKind.DELETION).html_tag, AnnotationKind.DELETION
        case WrapperPart.NEW:
            return spec_for(AnnotationKind.ADDITION).html_tag, AnnotationKind.ADDITION


def wrapper_meta(kind: AnnotationKind, part: WrapperPart) -> dict[str, Any]:
    """Meta dict attached to every wrapper token."""
    return {"kind": kind, "part": part}


def is_wrapper(token: Token) -> bool:
    """Return True if the token is an annotation wrapper token."""
    meta = token.meta
    return isinstance(meta.get("kind"), AnnotationKind) and isinstance(
        meta.get("part"), WrapperPart
    )


def all_token_types(prefix: str) -> Iterator[str]:
    """Yield every wrapper token type name for a namespace prefix."""
    for spec in CATALOG:
        for nesting in (1, -1):
            yield token_type(prefix, spec.kind, WrapperPart.ANNOTATION, nesting)
        if spec.kind is AnnotationKind.SUBSTITUTION:
            for part in (WrapperPart.OLD, WrapperPart.NEW):
                for nesting in (1, -1):
                    yield token_type(prefix, spec.kind, part, nesting)


__all__ = [
    "WrapperPart",
    "all_token_types",
    "is_wrapper",
    "token_type",
    "wrapper_element",
    "wrapper_meta",
]
