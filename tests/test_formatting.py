"""Tests for the editor text transformations."""

from __future__ import annotations

import pytest

from criticmark.formatting import (
    TextTransformation,
    addition_and_comment,
    deletion_and_comment,
    format_bold_italic,
    format_heading,
    highlight_and_comment,
    substitute_and_comment,
    wrap_code_block,
    wrap_lines,
    wrap_lines_numbered,
    wrap_selection,
)
from criticmark.scanner import iter_matches


class TestWrapSelection:
    def test_plain(self) -> None:
        assert wrap_selection("x", "**", "**") == TextTransformation("**x**")

    def test_cursor_offset_kept(self) -> None:
        assert wrap_selection("x", "{++", "++}", cursor_offset=3).cursor_offset == 3

    def test_comment_with_author(self) -> None:
        result = wrap_selection("note", "{>>", "<<}", cursor_offset=3, author_name="ana")
        assert result.new_text == "{>>@ana: note<<}"
        assert result.cursor_offset == 3 + len("@ana: ")

    def test_author_ignored_for_other_kinds(self) -> None:
        result = wrap_selection("x", "{==", "==}", author_name="ana")
        assert result.new_text == "{==x==}"

    def test_bold_italic(self) -> None:
        assert format_bold_italic("x").new_text == "***x***"


class TestLinePrefixes:
    def test_wrap_lines_skips_blank(self) -> None:
        assert wrap_lines("a\n\nb", "> ").new_text == "> a\n\n> b"

    def test_wrap_lines_skip_if_present(self) -> None:
        result = wrap_lines("- a\nb", "- ", skip_if_present=True)
        assert result.new_text == "- a\n- b"

    def test_wrap_lines_without_skip(self) -> None:
        assert wrap_lines("- a", "- ").new_text == "- - a"

    def test_numbered(self) -> None:
        assert wrap_lines_numbered("a\n\nb\nc").new_text == "1. a\n\n2. b\n3. c"

    def test_code_block(self) -> None:
        assert wrap_code_block("x = 1").new_text == "```\nx = 1\n```"


class TestHeading:
    def test_replaces_existing_prefix(self) -> None:
        assert format_heading("## Old\nplain", 3).new_text == "### Old\n### plain"

    def test_hash_without_space_kept(self) -> None:
        assert format_heading("#tag", 1).new_text == "# #tag"

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_invalid_level(self, level: int) -> None:
        with pytest.raises(ValueError, match="between 1 and 6"):
            format_heading("x", level)


class TestAnnotateAndComment:
    """Combined annotation + empty comment, cursor inside the comment."""

    @pytest.mark.parametrize(
        ("func", "expected"),
        [
            (highlight_and_comment, "{==txt==}{>><<}"),
            (substitute_and_comment, "{~~txt~>~~}{>><<}"),
            (addition_and_comment, "{++txt++}{>><<}"),
            (deletion_and_comment, "{--txt--}{>><<}"),
        ],
    )
    def test_without_author(self, func, expected: str) -> None:
        result = func("txt")
        assert result.new_text == expected
        assert result.new_text[result.cursor_offset :] == "<<}"

    @pytest.mark.parametrize(
        "func",
        [highlight_and_comment, substitute_and_comment, addition_and_comment, deletion_and_comment],
    )
    def test_with_author(self, func) -> None:
        result = func("txt", author_name="bo (2024-01-02 03:04)")
        assert result.new_text.endswith("{>>@bo (2024-01-02 03:04): <<}")
        assert result.new_text[: result.cursor_offset].endswith("@bo (2024-01-02 03:04): ")

    def test_output_is_recognised(self) -> None:
        text = substitute_and_comment("old", author_name="ana").new_text
        assert [m.spans for m in iter_matches(text)] == [("old", ""), ("@ana: ",)]
