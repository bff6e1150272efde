"""Text transformations behind the editor's markup commands.

Pure string functions: each takes the selected text and returns the
replacement plus, optionally, where the cursor should land (relative to the
start of the replacement). Editor wiring is left to the caller.

Example:
    >>> t = addition_and_comment("new text", author_name="ana")
    >>> t.new_text
    '{++new text++}{>>@ana: <<}'
    >>> t.new_text[: t.cursor_offset]
    '{++new text++}{>>@ana: '

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from criticmark.catalog import ADDITION, COMMENT, DELETION, HIGHLIGHT, SUBSTITUTION, PatternSpec

_HEADING_PREFIX_RE = re.compile(r"^#+\s")


@dataclass(frozen=True, slots=True)
class TextTransformation:
    """Replacement text and optional cursor offset within it."""

    new_text: str
    cursor_offset: int | None = None


def _author_prefix(author_name: str | None) -> str:
    return f"@{author_name}: " if author_name else ""


def wrap_selection(
    text: str,
    prefix: str,
    suffix: str,
    cursor_offset: int | None = None,
    author_name: str | None = None,
) -> TextTransformation:
    """Wrap text in prefix/suffix delimiters.

    When the prefix opens a comment and an author is given, ``@author: ``
    is inserted before the text and the cursor offset shifts to match.
    """
    if prefix == COMMENT.open and author_name:
        author = _author_prefix(author_name)
        if cursor_offset is not None:
            cursor_offset += len(author)
        return TextTransformation(prefix + author + text + suffix, cursor_offset)
    return TextTransformation(prefix + text + suffix, cursor_offset)


def wrap_lines(text: str, line_prefix: str, skip_if_present: bool = False) -> TextTransformation:
    """Prefix every non-blank line (e.g. ``> `` for quotes, ``- `` for lists)."""
    marker = line_prefix.strip()
    lines = []
    for line in text.split("\n"):
        if not line.strip() or (skip_if_present and line.lstrip().startswith(marker)):
            lines.append(line)
        else:
            lines.append(line_prefix + line)
    return TextTransformation("\n".join(lines))


def wrap_lines_numbered(text: str) -> TextTransformation:
    """Number every non-blank line; blank lines do not advance the counter."""
    counter = 1
    lines = []
    for line in text.split("\n"):
        if not line.strip():
            lines.append(line)
            continue
        lines.append(f"{counter}. {line}")
        counter += 1
    return TextTransformation("\n".join(lines))


def format_heading(text: str, level: int) -> TextTransformation:
    """Turn each line into a heading of ``level``, replacing existing ``#`` prefixes.

    Raises:
        ValueError: If level is outside 1–6
    """
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be between 1 and 6, got {level}")
    prefix = "#" * level + " "
    lines = [prefix + _HEADING_PREFIX_RE.sub("", line, count=1) for line in text.split("\n")]
    return TextTransformation("\n".join(lines))


def wrap_code_block(text: str) -> TextTransformation:
    return TextTransformation(f"```\n{text}\n```")


def format_bold_italic(text: str) -> TextTransformation:
    return wrap_selection(text, "***", "***")


def _annotate_and_comment(annotated: str, author_name: str | None) -> TextTransformation:
    author = _author_prefix(author_name)
    new_text = f"{annotated}{COMMENT.open}{author}{COMMENT.close}"
    return TextTransformation(new_text, len(annotated) + len(COMMENT.open) + len(author))


def _wrap(spec: PatternSpec, text: str) -> str:
    return f"{spec.open}{text}{spec.close}"


def highlight_and_comment(text: str, author_name: str | None = None) -> TextTransformation:
    """Highlight text and open an empty comment after it, cursor inside."""
    return _annotate_and_comment(_wrap(HIGHLIGHT, text), author_name)


def substitute_and_comment(text: str, author_name: str | None = None) -> TextTransformation:
    """Mark text as the old side of a substitution (new side empty), plus a comment."""
    annotated = f"{SUBSTITUTION.open}{text}{SUBSTITUTION.separator}{SUBSTITUTION.close}"
    return _annotate_and_comment(annotated, author_name)


def addition_and_comment(text: str, author_name: str | None = None) -> TextTransformation:
    return _annotate_and_comment(_wrap(ADDITION, text), author_name)


def deletion_and_comment(text: str, author_name: str | None = None) -> TextTransformation:
    return _annotate_and_comment(_wrap(DELETION, text), author_name)


__all__ = [
    "TextTransformation",
    "addition_and_comment",
    "deletion_and_comment",
    "format_bold_italic",
    "format_heading",
    "highlight_and_comment",
    "substitute_and_comment",
    "wrap_code_block",
    "wrap_lines",
    "wrap_lines_numbered",
    "wrap_selection",
]
