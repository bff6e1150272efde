"""Tests for author attribution."""

from __future__ import annotations

from datetime import datetime

from criticmark.author import AuthorSettings, format_author_name, resolve_author_name

NOW = datetime(2024, 3, 9, 14, 5)


def fixed(name: str):
    return lambda: name


def failing() -> str:
    raise OSError("no user")


class TestResolveAuthorName:
    def test_disabled(self) -> None:
        settings = AuthorSettings(include_author_name=False, author_name="ana")
        assert resolve_author_name(settings, fixed("os")) is None

    def test_explicit_name_wins(self) -> None:
        assert resolve_author_name(AuthorSettings(author_name="ana"), fixed("os")) == "ana"

    def test_blank_name_uses_os_username(self) -> None:
        assert resolve_author_name(AuthorSettings(author_name="  "), fixed("os")) == "os"

    def test_lookup_failure(self) -> None:
        assert resolve_author_name(AuthorSettings(), failing) is None

    def test_blank_os_username(self) -> None:
        assert resolve_author_name(AuthorSettings(), fixed(" ")) is None


class TestFormatAuthorName:
    def test_with_timestamp(self) -> None:
        result = format_author_name(AuthorSettings(author_name="ana"), NOW)
        assert result == "ana (2024-03-09 14:05)"

    def test_without_timestamp(self) -> None:
        settings = AuthorSettings(author_name="ana", include_timestamp=False)
        assert format_author_name(settings, NOW) == "ana"

    def test_no_author(self) -> None:
        settings = AuthorSettings(include_author_name=False)
        assert format_author_name(settings, NOW) is None

    def test_os_username(self) -> None:
        assert format_author_name(AuthorSettings(), NOW, fixed("os")) == "os (2024-03-09 14:05)"

    def test_defaults_to_now(self) -> None:
        result = format_author_name(AuthorSettings(author_name="ana"))
        assert result is not None
        assert result.startswith(f"ana ({datetime.now():%Y-}")
