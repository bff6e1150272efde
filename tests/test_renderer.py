"""Tests for the wrapper token stream and HTML render rules."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt

from criticmark.catalog import CATALOG, AnnotationKind
from criticmark.config import MarkupConfig
from criticmark.renderers.html import close_tag, open_tag
from criticmark.tokens import WrapperPart, all_token_types, is_wrapper, token_type


def inline_children(md: MarkdownIt, source: str):
    tokens = md.parse(source)
    (inline,) = [t for t in tokens if t.type == "inline"]
    return inline.children


class TestTags:
    """open_tag()/close_tag() for every wrapper."""

    @pytest.mark.parametrize(
        ("kind", "part", "expected_open", "expected_close"),
        [
            (AnnotationKind.ADDITION, WrapperPart.ANNOTATION, '<ins class="ns-addition">', "</ins>"),
            (AnnotationKind.DELETION, WrapperPart.ANNOTATION, '<del class="ns-deletion">', "</del>"),
            (AnnotationKind.COMMENT, WrapperPart.ANNOTATION, '<span class="ns-comment">', "</span>"),
            (AnnotationKind.HIGHLIGHT, WrapperPart.ANNOTATION, '<mark class="ns-highlight">', "</mark>"),
            (
                AnnotationKind.SUBSTITUTION,
                WrapperPart.ANNOTATION,
                '<span class="ns-substitution">',
                "</span>",
            ),
            (AnnotationKind.SUBSTITUTION, WrapperPart.OLD, '<del class="ns-deletion">', "</del>"),
            (AnnotationKind.SUBSTITUTION, WrapperPart.NEW, '<ins class="ns-addition">', "</ins>"),
        ],
    )
    def test_tags(
        self,
        kind: AnnotationKind,
        part: WrapperPart,
        expected_open: str,
        expected_close: str,
    ) -> None:
        config = MarkupConfig(namespace="ns")
        assert open_tag(config, kind, part) == expected_open
        assert close_tag(kind, part) == expected_close


class TestTokenTypes:
    """Token type names are namespaced and cover every wrapper."""

    def test_token_type_names(self) -> None:
        assert token_type("p", AnnotationKind.COMMENT, WrapperPart.ANNOTATION, 1) == "p_comment_open"
        assert token_type("p", AnnotationKind.COMMENT, WrapperPart.ANNOTATION, -1) == "p_comment_close"
        assert (
            token_type("p", AnnotationKind.SUBSTITUTION, WrapperPart.OLD, 1)
            == "p_substitution_old_open"
        )

    def test_all_token_types(self) -> None:
        names = list(all_token_types("x"))
        # Two per kind, plus old/new open/close for substitution
        assert len(names) == 2 * len(CATALOG) + 4
        assert len(set(names)) == len(names)
        assert "x_substitution_new_close" in names

    def test_dash_namespace_uses_underscore_prefix(self) -> None:
        config = MarkupConfig(namespace="my-review")
        assert config.token_type(AnnotationKind.ADDITION, WrapperPart.ANNOTATION, 1) == (
            "my_review_addition_open"
        )
        assert config.css_class(AnnotationKind.ADDITION) == "my-review-addition"


class TestTokenStream:
    """Shape and tagging of the emitted tokens."""

    def test_simple_kind(self, md: MarkdownIt) -> None:
        children = inline_children(md, "{==x==}")
        assert [t.type for t in children] == [
            "criticmarkup_highlight_open",
            "text",
            "criticmarkup_highlight_close",
        ]
        assert [t.nesting for t in children] == [1, 0, -1]
        assert [t.level for t in children] == [0, 1, 0]
        assert children[0].attrGet("class") == "criticmarkup-highlight"

    def test_substitution_order(self, md: MarkdownIt) -> None:
        children = inline_children(md, "{~~a~>b~~}")
        assert [t.type for t in children] == [
            "criticmarkup_substitution_open",
            "criticmarkup_substitution_old_open",
            "text",
            "criticmarkup_substitution_old_close",
            "criticmarkup_substitution_new_open",
            "text",
            "criticmarkup_substitution_new_close",
            "criticmarkup_substitution_close",
        ]
        assert [t.content for t in children if t.type == "text"] == ["a", "b"]
        assert [t.meta["part"] for t in children if is_wrapper(t)] == [
            WrapperPart.ANNOTATION,
            WrapperPart.OLD,
            WrapperPart.OLD,
            WrapperPart.NEW,
            WrapperPart.NEW,
            WrapperPart.ANNOTATION,
        ]

    def test_meta_tags(self, md: MarkdownIt) -> None:
        children = inline_children(md, "{--x--}")
        wrappers = [t for t in children if is_wrapper(t)]
        assert len(wrappers) == 2
        for token in wrappers:
            assert token.meta == {"kind": AnnotationKind.DELETION, "part": WrapperPart.ANNOTATION}

    def test_empty_content_has_no_children_between(self, md: MarkdownIt) -> None:
        children = inline_children(md, "{++++}")
        assert [t.nesting for t in children] == [1, -1]

    def test_nested_markdown_levels(self, md: MarkdownIt) -> None:
        children = inline_children(md, "{++*x*++}")
        assert [(t.type, t.level) for t in children] == [
            ("criticmarkup_addition_open", 0),
            ("em_open", 1),
            ("text", 2),
            ("em_close", 1),
            ("criticmarkup_addition_close", 0),
        ]

    def test_plain_tokens_are_not_wrappers(self, md: MarkdownIt) -> None:
        children = inline_children(md, "plain *text*")
        assert not any(is_wrapper(t) for t in children)

    def test_wrappers_balance(self, md: MarkdownIt) -> None:
        children = inline_children(md, "{++a {>>b<<}++} {~~c~>d~~} {==e==}")
        depth = 0
        for token in children:
            depth += token.nesting
            assert depth >= 0
        assert depth == 0


class TestRenderRules:
    """Render rules are registered per namespace."""

    def test_rules_registered(self, ns_md: MarkdownIt, namespace: str) -> None:
        for name in all_token_types(namespace):
            assert name in ns_md.renderer.rules

    def test_render_uses_config_namespace(self, ns_md: MarkdownIt, namespace: str) -> None:
        assert ns_md.render("{>>x<<}") == f'<p><span class="{namespace}-comment">x</span></p>\n'
