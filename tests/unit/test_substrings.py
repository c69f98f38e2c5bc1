#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_substrings.py
"""Unit tests for code-point substring, padding and wrapping helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from strtools.substrings import (
    clear_spaces,
    compare_left,
    compare_right,
    complete_left,
    complete_right,
    exist_substring,
    get_extension,
    get_left,
    get_position,
    get_right,
    invert_slashes,
    remove_left,
    remove_position,
    remove_right,
    wrap,
)


@pytest.mark.unit
class TestGetExtension:
    """Test get_extension."""

    def test_last_dot_wins(self) -> None:
        """Test that only the part after the last dot is returned."""
        assert get_extension("a.b.txt") == "txt"

    def test_no_dot(self) -> None:
        """Test a name without any dot."""
        assert get_extension("noext") == ""

    def test_trailing_dot(self) -> None:
        """Test a name that ends with a dot."""
        assert get_extension("file.") == ""

    def test_dotfile(self) -> None:
        """Test a hidden file name."""
        assert get_extension(".bashrc") == "bashrc"

    def test_unicode_name(self) -> None:
        """Test a file name with non-ASCII characters."""
        assert get_extension("отчёт.доку") == "доку"


@pytest.mark.unit
class TestClearSpaces:
    """Test clear_spaces."""

    def test_collapse_runs(self) -> None:
        """Test that runs of whitespace become one space."""
        assert clear_spaces("a   b\t\t c") == "a b c"

    def test_single_whitespace_untouched(self) -> None:
        """Test that a lone tab or newline is kept as is."""
        assert clear_spaces("a\tb\nc") == "a\tb\nc"

    def test_ends_not_stripped(self) -> None:
        """Test that leading and trailing runs collapse but stay."""
        assert clear_spaces("  a  ") == " a "

    def test_unicode_whitespace_not_collapsed(self) -> None:
        """Test that non-ASCII whitespace is not part of a run."""
        assert clear_spaces("a\u00a0\u00a0b") == "a\u00a0\u00a0b"


@pytest.mark.unit
class TestComplete:
    """Test complete_left and complete_right."""

    def test_left_pads(self) -> None:
        """Test left padding with the default zero."""
        assert complete_left("5", 3, "0") == "005"
        assert complete_left("5", 3) == "005"

    def test_left_never_truncates(self) -> None:
        """Test that longer input is returned unchanged."""
        assert complete_left("555", 2) == "555"

    def test_right_pads(self) -> None:
        """Test right padding with a custom symbol."""
        assert complete_right("ab", 5, "*") == "ab***"

    def test_multi_char_symbol_is_noop(self) -> None:
        """Test that a symbol longer than one character is rejected."""
        assert complete_left("5", 3, "00") == "5"
        assert complete_right("5", 3, "") == "5"

    def test_counts_code_points(self) -> None:
        """Test that Cyrillic input is measured in code points."""
        assert complete_left("жж", 4, "ё") == "ёёжж"

    @given(st.text(max_size=20), st.integers(min_value=-5, max_value=40))
    def test_length_property(self, text: str, length: int) -> None:
        """Test that padded length is the maximum of input and target length."""
        assert len(complete_left(text, length)) == max(len(text), length)
        assert len(complete_right(text, length)) == max(len(text), length)


@pytest.mark.unit
class TestInvertSlashes:
    """Test invert_slashes."""

    def test_windows_path(self) -> None:
        """Test converting a Windows path."""
        assert invert_slashes("C:\\Users\\me\\file.txt") == "C:/Users/me/file.txt"


@pytest.mark.unit
class TestEdgeSlices:
    """Test get_left, get_right, remove_left and remove_right."""

    def test_get_left(self) -> None:
        """Test taking leading code points."""
        assert get_left("привет", 3) == "при"
        assert get_left("ab", 5) == "ab"
        assert get_left("abc", 0) == ""

    def test_get_left_negative(self) -> None:
        """Test that a negative length omits code points from the end."""
        assert get_left("abcdef", -2) == "abcd"
        assert get_left("abc", -5) == ""

    def test_get_right(self) -> None:
        """Test taking trailing code points."""
        assert get_right("привет", 3) == "вет"
        assert get_right("ab", 5) == "ab"

    def test_get_right_zero(self) -> None:
        """Test that a zero length gives an empty string."""
        assert get_right("abc", 0) == ""

    def test_remove_left(self) -> None:
        """Test dropping leading code points."""
        assert remove_left("привет", 2) == "ивет"
        assert remove_left("abc", 5) == ""
        assert remove_left("abc", 0) == "abc"

    def test_remove_right(self) -> None:
        """Test dropping trailing code points."""
        assert remove_right("привет", 2) == "прив"
        assert remove_right("abc", 5) == ""

    def test_remove_right_zero(self) -> None:
        """Test that dropping nothing keeps the text."""
        assert remove_right("abc", 0) == "abc"

    @given(st.text(max_size=30), st.integers(min_value=0, max_value=40))
    def test_left_and_remove_left_partition(self, text: str, n: int) -> None:
        """Test that the head and the rest rebuild the text."""
        assert get_left(text, n) + remove_left(text, n) == text


@pytest.mark.unit
class TestCompare:
    """Test compare_left and compare_right."""

    def test_compare_left(self) -> None:
        """Test prefix checks."""
        assert compare_left("hello world", "hello") is True
        assert compare_left("hi", "hello") is False
        assert compare_left("hello", "world") is False

    def test_compare_right(self) -> None:
        """Test suffix checks."""
        assert compare_right("hello world", "world") is True
        assert compare_right("ld", "world") is False
        assert compare_right("hello", "hell") is False


@pytest.mark.unit
class TestPosition:
    """Test get_position and remove_position."""

    def test_get_position(self) -> None:
        """Test single code point access."""
        assert get_position("абв", 1) == "б"
        assert get_position("абв", -1) == "в"

    def test_get_position_out_of_range(self) -> None:
        """Test that out-of-range indices give an empty string."""
        assert get_position("abc", 3) == ""
        assert get_position("abc", -4) == ""
        assert get_position("", 0) == ""

    def test_remove_position_middle(self) -> None:
        """Test removing an inner code point."""
        assert remove_position("abcd", 1) == "acd"
        assert remove_position("abcd", 3) == "abc"

    def test_remove_position_zero_is_kept(self) -> None:
        """Test that the first code point is never removed."""
        assert remove_position("abcd", 0) == "abcd"

    def test_remove_position_negative(self) -> None:
        """Test removing from the end."""
        assert remove_position("abcd", -1) == "abc"
        assert remove_position("abcd", -2) == "abd"
        assert remove_position("abcd", -4) == "bcd"

    def test_remove_position_out_of_range(self) -> None:
        """Test that out-of-range positions leave the text unchanged."""
        assert remove_position("abcd", 4) == "abcd"
        assert remove_position("abcd", -5) == "abcd"

    def test_remove_position_unicode(self) -> None:
        """Test removal by code point in Cyrillic text."""
        assert remove_position("привет", 2) == "првет"


@pytest.mark.unit
class TestExistSubstring:
    """Test exist_substring."""

    def test_contains(self) -> None:
        """Test containment."""
        assert exist_substring("hello world", "o w") is True
        assert exist_substring("hello", "xyz") is False

    def test_equal(self) -> None:
        """Test equal strings, including empty ones."""
        assert exist_substring("abc", "abc") is True
        assert exist_substring("", "") is True


@pytest.mark.unit
class TestWrap:
    """Test wrap."""

    def test_same_on_both_sides(self) -> None:
        """Test wrapping with a single argument."""
        assert wrap("x", "*") == "*x*"

    def test_distinct_sides(self) -> None:
        """Test wrapping with different left and right parts."""
        assert wrap("x", "[", "]") == "[x]"

    def test_empty_right_is_used(self) -> None:
        """Test that an explicit empty right part is honored."""
        assert wrap("x", "<", "") == "<x"
