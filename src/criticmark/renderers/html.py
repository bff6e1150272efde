"""HTML render rules for annotation wrapper tokens.

Each wrapper token renders to a single open or close tag:

    {++a++}        → <ins class="{ns}-addition">a</ins>
    {--a--}        → <del class="{ns}-deletion">a</del>
    {~~a~>b~~}     → <span class="{ns}-substitution"><del class="{ns}-deletion">a</del><ins class="{ns}-addition">b</ins></span>
    {>>a<<}        → <span class="{ns}-comment">a</span>
    {==a==}        → <mark class="{ns}-highlight">a</mark>

Text between the tags comes from the host's own text rule, which does the
HTML escaping; nothing here escapes content.

Thread Safety:
Render rules are pure functions of the token and the frozen config.
Multiple threads can render with the same MarkdownIt instance.

"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, Sequence
from typing import TYPE_CHECKING, Any

from criticmark.catalog import AnnotationKind
from criticmark.tokens import WrapperPart, wrapper_element

if TYPE_CHECKING:
    from markdown_it.renderer import RendererHTML
    from markdown_it.token import Token

    from criticmark.config import MarkupConfig

RenderRule = Callable[
    ["RendererHTML", Sequence["Token"], int, Any, MutableMapping[str, Any]], str
]


def open_tag(config: MarkupConfig, kind: AnnotationKind, part: WrapperPart) -> str:
    """Render the opening tag for a wrapper.

    Example:
        >>> open_tag(MarkupConfig(), AnnotationKind.HIGHLIGHT, WrapperPart.ANNOTATION)
        '<mark class="criticmarkup-highlight">'
    """
    tag, class_kind = wrapper_element(kind, part)
    return f'<{tag} class="{config.css_class(class_kind)}">'


def close_tag(kind: AnnotationKind, part: WrapperPart) -> str:
    """Render the closing tag for a wrapper."""
    tag, _ = wrapper_element(kind, part)
    return f"</{tag}>"


def make_render_rule(config: MarkupConfig) -> RenderRule:
    """Create the render rule shared by every wrapper token type.

    The rule dispatches on the token's kind/part tags, not on its type name.

    Args:
        config: Namespace used for CSS classes

    Returns:
        A markdown-it render rule ``(renderer, tokens, idx, options, env) -> str``

    """

    def render_wrapper(
        renderer: RendererHTML,
        tokens: Sequence[Token],
        idx: int,
        options: Any,
        env: MutableMapping[str, Any],
    ) -> str:
        token = tokens[idx]
        kind: AnnotationKind = token.meta["kind"]
        part: WrapperPart = token.meta["part"]
        if token.nesting > 0:
            return open_tag(config, kind, part)
        return close_tag(kind, part)

    return render_wrapper


__all__ = [
    "close_tag",
    "make_render_rule",
    "open_tag",
]
