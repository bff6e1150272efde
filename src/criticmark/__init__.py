"""
criticmark — CriticMarkup annotations for markdown-it-py

Recognises the five CriticMarkup annotations inside Markdown and renders them
as styled HTML for a live preview, while normal Markdown keeps working inside
and around them. Also provides a navigation index for jumping between
annotations.

Quick Start:
    >>> from criticmark import render
    >>> render("Hello {++big ++}**world**")
    '<p>Hello <ins class="criticmarkup-addition">big </ins><strong>world</strong></p>\\n'

    >>> # As a markdown-it-py plugin
    >>> from markdown_it import MarkdownIt
    >>> from criticmark import mdmarkup_plugin
    >>> md = MarkdownIt().use(mdmarkup_plugin)
    >>> md.render("{>>note<<}")
    '<p><span class="mdmarkup-comment">note</span></p>\\n'

Navigation:
    >>> from criticmark import find_all, next_range
    >>> next_range("a {==b==} c", 0).start_offset
    2

Installation:
    pip install criticmark
"""

from criticmark.catalog import CATALOG, AnnotationKind, PatternSpec, spec_for
from criticmark.config import MarkupConfig
from criticmark.errors import ConfigError, CriticMarkError, PluginError
from criticmark.location import LineIndex, NavigationRange, Position
from criticmark.navigation import find_all, next_range, prev_range
from criticmark.plugin import (
    BUILTIN_PLUGINS,
    create_markdown,
    criticmarkup_plugin,
    get_plugin,
    markup_plugin,
    mdmarkup_plugin,
    render,
)
from criticmark.scanner import MatchResult, find_next, iter_matches, match_at
from criticmark.theme import ColorScheme, load_stylesheet, render_stylesheet
from criticmark.tokens import WrapperPart

__version__ = "0.1.0"

__all__ = [
    "AnnotationKind",
    "BUILTIN_PLUGINS",
    "CATALOG",
    "ColorScheme",
    "ConfigError",
    "CriticMarkError",
    "LineIndex",
    "MarkupConfig",
    "MatchResult",
    "NavigationRange",
    "PatternSpec",
    "PluginError",
    "Position",
    "WrapperPart",
    "create_markdown",
    "criticmarkup_plugin",
    "find_all",
    "find_next",
    "get_plugin",
    "iter_matches",
    "load_stylesheet",
    "markup_plugin",
    "match_at",
    "mdmarkup_plugin",
    "next_range",
    "prev_range",
    "render",
    "render_stylesheet",
    "spec_for",
]
