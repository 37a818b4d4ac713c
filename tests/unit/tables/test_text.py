"""Tests for string measuring and truncation helpers."""

from __future__ import annotations

import pytest

from tablewright.tables.models import Alignment
from tablewright.tables.text import (
    cell_width,
    fit,
    truncate_middle,
    truncate_string,
    truncate_with_suffix,
)


class TestCellWidth:
    """Test terminal cell measurement."""

    @pytest.mark.unit
    def test_ascii(self) -> None:
        """Test ASCII characters are one cell each."""
        assert cell_width("hello") == 5

    @pytest.mark.unit
    def test_wide_characters(self) -> None:
        """Test CJK characters are two cells each."""
        assert cell_width("日本") == 4


class TestFit:
    """Test padding lines to a fixed width."""

    @pytest.mark.unit
    def test_left(self) -> None:
        """Test left alignment pads on the right."""
        assert fit("ab", 5) == "ab   "

    @pytest.mark.unit
    def test_right(self) -> None:
        """Test right alignment pads on the left."""
        assert fit("ab", 5, Alignment.RIGHT) == "   ab"

    @pytest.mark.unit
    def test_center_puts_extra_space_right(self) -> None:
        """Test centering with an odd gap."""
        assert fit("ab", 5, Alignment.CENTER) == " ab  "

    @pytest.mark.unit
    def test_crops_wider_text(self) -> None:
        """Test text wider than the target is cropped."""
        assert fit("abcdef", 3) == "abc"

    @pytest.mark.unit
    def test_non_positive_width(self) -> None:
        """Test a zero width yields an empty string."""
        assert fit("abc", 0) == ""


class TestTruncateString:
    """Test truncation with the default suffix."""

    @pytest.mark.unit
    def test_short_string_unchanged(self) -> None:
        """Test strings that fit are returned as-is."""
        assert truncate_string("Hello", 10) == "Hello"

    @pytest.mark.unit
    def test_exact_fit_unchanged(self) -> None:
        """Test strings exactly at the limit are not cut."""
        assert truncate_string("Hello", 5) == "Hello"

    @pytest.mark.unit
    def test_long_string_truncated(self) -> None:
        """Test long strings are cut and get an ellipsis."""
        assert truncate_string("Hello, World!", 8) == "Hello..."

    @pytest.mark.unit
    def test_wide_characters(self) -> None:
        """Test truncation counts wide characters as two cells."""
        result = truncate_string("日本語テキスト", 7)
        assert result == "日本..."
        assert cell_width(result) == 7


class TestTruncateWithSuffix:
    """Test truncation with a custom suffix."""

    @pytest.mark.unit
    def test_custom_suffix(self) -> None:
        """Test a one-cell suffix leaves room for more text."""
        assert truncate_with_suffix("Hello, World!", 8, "…") == "Hello, …"

    @pytest.mark.unit
    def test_suffix_wider_than_limit(self) -> None:
        """Test the suffix itself is cut when nothing else fits."""
        assert truncate_with_suffix("Hello, World!", 2, "...") == ".."

    @pytest.mark.unit
    def test_non_positive_limit(self) -> None:
        """Test a zero limit yields an empty string."""
        assert truncate_with_suffix("Hello", 0, "...") == ""

    @pytest.mark.unit
    @pytest.mark.parametrize("width", [1, 3, 4, 8, 12])
    def test_result_never_exceeds_limit(self, width: int) -> None:
        """Test the result always fits the limit."""
        assert cell_width(truncate_with_suffix("a fairly long value", width, "...")) <= width


class TestTruncateMiddle:
    """Test truncation in the middle of a string."""

    @pytest.mark.unit
    def test_short_string_unchanged(self) -> None:
        """Test strings that fit are returned as-is."""
        assert truncate_middle("/tmp/file", 20) == "/tmp/file"

    @pytest.mark.unit
    def test_keeps_both_ends(self) -> None:
        """Test the start and end of a path survive."""
        assert truncate_middle("/very/long/path/to/file.txt", 20) == "/very/lon...file.txt"

    @pytest.mark.unit
    def test_tiny_limit(self) -> None:
        """Test limits narrower than the marker return part of the marker."""
        assert truncate_middle("abcdefgh", 2) == ".."
