"""Inline rule for annotations, with content re-entry.

The rule is registered before markdown-it's ``emphasis`` rule and only does
work when the current character is ``{``. On a match it emits balanced
wrapper tokens and re-runs the host's own inline tokenizer over the captured
text, so ``{++**bold**++}`` renders the bold inside the insertion.

Code spans are immune because ``backticks`` runs earlier at the backtick
and consumes the whole span before this rule ever sees its ``{``.

Recursion:
Re-entry recurses through state.md.inline.parse(). It terminates because each
captured span is strictly shorter than the match it came from (the delimiters
are excluded); the host's maxNesting guard bounds depth as well.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from criticmark.catalog import AnnotationKind
from criticmark.scanner import MatchResult, match_at
from criticmark.tokens import WrapperPart, wrapper_element, wrapper_meta

if TYPE_CHECKING:
    from markdown_it.rules_inline import StateInline
    from markdown_it.token import Token

    from criticmark.config import MarkupConfig

InlineRule = Callable[["StateInline", bool], bool]

OPEN_BRACE = "{"


def add_inline_content(state: StateInline, content: str) -> None:
    """Tokenize ``content`` with the host inline parser and splice it in.

    Child tokens are re-pushed through state.push() so nesting levels and
    delimiter stacks stay consistent with the parent stream.

    Args:
        state: Current inline parsing state
        content: Captured annotation text

    """
    if not content:
        return

    children: list[Token] = []
    state.md.inline.parse(content, state.md, state.env, children)

    for child in children:
        token = state.push(child.type, child.tag, child.nesting)
        token.content = child.content
        token.markup = child.markup
        token.info = child.info
        token.meta = child.meta
        token.hidden = child.hidden
        if child.attrs:
            for key, value in child.attrs.items():
                token.attrSet(key, value)
        if child.children:
            token.children = child.children


def _push_wrapped(
    state: StateInline,
    config: MarkupConfig,
    kind: AnnotationKind,
    part: WrapperPart,
    content: str,
) -> None:
    tag, class_kind = wrapper_element(kind, part)

    token = state.push(config.token_type(kind, part, 1), tag, 1)
    token.attrSet("class", config.css_class(class_kind))
    token.meta = wrapper_meta(kind, part)

    add_inline_content(state, content)

    token = state.push(config.token_type(kind, part, -1), tag, -1)
    token.meta = wrapper_meta(kind, part)


def push_annotation(state: StateInline, config: MarkupConfig, match: MatchResult) -> None:
    """Emit the wrapper tokens and re-entered children for a match."""
    kind = match.kind
    if kind is not AnnotationKind.SUBSTITUTION:
        (content,) = match.spans
        _push_wrapped(state, config, kind, WrapperPart.ANNOTATION, content)
        return

    old_text, new_text = match.spans
    tag, _ = wrapper_element(kind, WrapperPart.ANNOTATION)
    token = state.push(config.token_type(kind, WrapperPart.ANNOTATION, 1), tag, 1)
    token.attrSet("class", config.css_class(kind))
    token.meta = wrapper_meta(kind, WrapperPart.ANNOTATION)

    _push_wrapped(state, config, kind, WrapperPart.OLD, old_text)
    _push_wrapped(state, config, kind, WrapperPart.NEW, new_text)

    token = state.push(config.token_type(kind, WrapperPart.ANNOTATION, -1), tag, -1)
    token.meta = wrapper_meta(kind, WrapperPart.ANNOTATION)


def make_inline_rule(config: MarkupConfig) -> InlineRule:
    """Create the inline rule bound to a configuration.

    Args:
        config: Namespace and options for the emitted tokens

    Returns:
        A markdown-it inline rule ``(state, silent) -> bool``

    """

    def annotation_inline(state: StateInline, silent: bool) -> bool:
        if state.src[state.pos] != OPEN_BRACE:
            return False

        match = match_at(state.src, state.pos, state.posMax)
        if match is None:
            return False

        if not silent:
            push_annotation(state, config, match)

        state.pos = match.end
        return True

    return annotation_inline


__all__ = [
    "add_inline_content",
    "make_inline_rule",
    "push_annotation",
]
