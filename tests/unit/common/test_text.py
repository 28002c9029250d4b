"""Tests for common.text module."""

from common.text import TRUNCATION_MARKER, normalize_whitespace, truncate_text


class TestNormalizeWhitespace:
    def test_collapses_whitespace(self) -> None:
        assert normalize_whitespace("multiple   spaces \n\n here") == "multiple spaces here"

    def test_trims(self) -> None:
        assert normalize_whitespace("  \t padded \n") == "padded"

    def test_collapses_non_breaking_spaces(self) -> None:
        assert normalize_whitespace("a\u00a0\u00a0b") == "a b"

    def test_none_returns_empty(self) -> None:
        assert normalize_whitespace(None) == ""

    def test_whitespace_only_returns_empty(self) -> None:
        assert normalize_whitespace("   \n\t ") == ""


class TestTruncateText:
    def test_short_text_unchanged(self) -> None:
        assert truncate_text("hello", 10) == "hello"

    def test_exact_length_unchanged(self) -> None:
        assert truncate_text("a" * 10, 10) == "a" * 10

    def test_long_text_cut_with_marker(self) -> None:
        result = truncate_text("a" * 15, 10)
        assert result == "a" * 10 + TRUNCATION_MARKER
