"""markdown-it-py plugin registration for criticmark.

Registers, per namespace:

1. A block rule before ``heading`` (multi-line annotations that start a line)
2. An inline rule before ``emphasis`` (every ``{`` position)
3. One render rule per wrapper token type

The anchor points are a precedence contract: annotations must be claimed
before heading detection and before emphasis can consume ``*``/``_`` runs.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from criticmark import criticmarkup_plugin
    >>>
    >>> md = MarkdownIt().use(criticmarkup_plugin)
    >>> md.render("{~~old~>new~~}")
    '<p><span class="criticmarkup-substitution"><del class="criticmarkup-deletion">old</del><ins class="criticmarkup-addition">new</ins></span></p>\\n'

    >>> # Or by name
    >>> md = create_markdown("mdmarkup")

Thread Safety:
Plugins hold no state beyond their frozen MarkupConfig. A configured
MarkdownIt instance can render concurrently from several threads.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from markdown_it import MarkdownIt

from criticmark.config import MarkupConfig
from criticmark.errors import PluginError
from criticmark.parsing import make_block_rule, make_inline_rule
from criticmark.renderers.html import make_render_rule
from criticmark.tokens import all_token_types
from criticmark.utils.logger import get_logger

logger = get_logger(__name__)

Plugin = Callable[..., None]

INLINE_ANCHOR = "emphasis"
BLOCK_ANCHOR = "heading"


def markup_plugin(md: MarkdownIt, config: MarkupConfig | None = None) -> None:
    """Register annotation parsing and rendering on a MarkdownIt instance.

    Args:
        md: MarkdownIt instance to extend
        config: Namespace and options (defaults to the "criticmarkup" namespace)

    Raises:
        PluginError: If the namespace is already registered on ``md`` or the
            host lacks the ``emphasis``/``heading`` anchor rules

    """
    config = config or MarkupConfig()

    if config.inline_rule_name in md.inline.ruler.get_all_rules():
        raise PluginError(config.namespace, "already registered on this MarkdownIt instance")

    try:
        if config.multiline_blocks:
            md.block.ruler.before(BLOCK_ANCHOR, config.block_rule_name, make_block_rule(config))
        md.inline.ruler.before(INLINE_ANCHOR, config.inline_rule_name, make_inline_rule(config))
    except KeyError as e:
        raise PluginError(config.namespace, f"host parser is missing an anchor rule ({e})") from e

    render_rule = make_render_rule(config)
    for name in all_token_types(config.token_prefix):
        md.add_render_rule(name, render_rule)

    logger.debug(
        "Registered %s plugin (multiline_blocks=%s)",
        config.namespace,
        config.multiline_blocks,
    )


def criticmarkup_plugin(md: MarkdownIt, **options: Any) -> None:
    """Register the ``criticmarkup-*`` namespace."""
    markup_plugin(md, MarkupConfig.from_dict({**options, "namespace": "criticmarkup"}))


def mdmarkup_plugin(md: MarkdownIt, **options: Any) -> None:
    """Register the ``mdmarkup-*`` namespace."""
    markup_plugin(md, MarkupConfig.from_dict({**options, "namespace": "mdmarkup"}))


# Registry of built-in namespaces
BUILTIN_PLUGINS: dict[str, Plugin] = {
    "criticmarkup": criticmarkup_plugin,
    "mdmarkup": mdmarkup_plugin,
}


def get_plugin(name: str) -> Plugin:
    """Get a built-in plugin by namespace name.

    Args:
        name: Namespace (e.g., "criticmarkup", "mdmarkup")

    Returns:
        Plugin function accepting ``(md, **options)``

    Raises:
        KeyError: If plugin name is not recognized

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise KeyError(f"Unknown plugin: {name!r}. Available: {available}")
    return BUILTIN_PLUGINS[name]


def create_markdown(
    namespace: str = "criticmarkup",
    *,
    preset: str = "commonmark",
    **options: Any,
) -> MarkdownIt:
    """Create a MarkdownIt instance with one annotation namespace enabled.

    Args:
        namespace: Built-in namespace name
        preset: markdown-it preset ("commonmark", "default", "zero", ...)
        **options: MarkupConfig fields (e.g. ``multiline_blocks=False``)

    Returns:
        Configured MarkdownIt instance

    """
    md = MarkdownIt(preset)
    md.use(get_plugin(namespace), **options)
    return md


def render(source: str, *, namespace: str = "criticmarkup", **options: Any) -> str:
    """Render Markdown with annotations to HTML.

    Example:
        >>> render("{++added++}")
        '<p><ins class="criticmarkup-addition">added</ins></p>\\n'
    """
    return create_markdown(namespace, **options).render(source)


__all__ = [
    "BUILTIN_PLUGINS",
    "create_markdown",
    "criticmarkup_plugin",
    "get_plugin",
    "markup_plugin",
    "mdmarkup_plugin",
    "render",
]
