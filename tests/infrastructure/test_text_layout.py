"""Unit tests for word wrapping and centring."""

import pytest

from teashop.infrastructure.terminal.text_layout import center_pad, wrap


class TestWrap:

    def test_short_words_respect_width(self):
        lines = wrap("a b c d", 3)
        assert lines == ["a b", "c d"]
        assert all(len(line) <= 3 for line in lines)

    def test_greedy_packing(self):
        assert wrap("the quick brown fox jumps", 10) == ["the quick", "brown fox", "jumps"]

    def test_long_word_not_split(self):
        assert wrap("hi supercalifragilistic yo", 5) == ["hi", "supercalifragilistic", "yo"]

    @pytest.mark.parametrize("width", [1, 2, 3, 4, 7])
    def test_only_lone_long_words_exceed_width(self, width):
        for line in wrap("a bb ccc dddd eeeee f", width):
            assert len(line) <= width or " " not in line

    def test_extra_whitespace_collapsed(self):
        assert wrap("  tea   and  milk ", 20) == ["tea and milk"]

    def test_double_space_does_not_cost_width(self):
        assert wrap("a  b", 3) == ["a b"]

    def test_tabs_and_newlines_are_word_breaks(self):
        assert wrap("a\tb\nc", 3) == ["a b", "c"]
        assert wrap("tea\t\tmilk", 8) == ["tea milk"]

    @pytest.mark.parametrize("width", [0, -5])
    def test_non_positive_width_puts_each_word_alone(self, width):
        assert wrap("ab cd", width) == ["ab", "cd"]

    def test_deterministic(self):
        text = "brown sugar boba with extra tapioca pearls please"
        assert wrap(text, 12) == wrap(text, 12)


class TestCenterPad:

    def test_even_split(self):
        assert center_pad("ab", 6) == (2, 2)

    def test_odd_leftover_goes_right(self):
        assert center_pad("abc", 6) == (1, 2)

    def test_exact_fit(self):
        assert center_pad("abcdef", 6) == (0, 0)

    def test_overflow_clamped(self):
        assert center_pad("abcdefgh", 6) == (0, 0)

    def test_empty_line(self):
        assert center_pad("", 98) == (49, 49)
