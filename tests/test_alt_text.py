"""Tests for alt-text word splitting."""

import pytest

from numnums.alt_text import split_alt_words


class TestSplitAltWords:
    def test_sentence(self) -> None:
        words = split_alt_words("I am a great description.  Thanks for reading me!")
        assert words == [
            "I",
            "am",
            "a",
            "great",
            "description.",
            "Thanks",
            "for",
            "reading",
            "me!",
        ]
        assert len(words) == 9

    def test_runs_of_spaces_collapse(self) -> None:
        assert split_alt_words("word word  word") == ["word", "word", "word"]

    def test_leading_and_trailing_whitespace(self) -> None:
        assert split_alt_words("  a b  ") == ["a", "b"]

    @pytest.mark.parametrize("alt", ["", " ", "\t\n\r\f"])
    def test_no_words(self, alt: str) -> None:
        assert split_alt_words(alt) == []

    def test_mixed_ascii_whitespace(self) -> None:
        assert split_alt_words("a\tb\nc\rd\fe") == ["a", "b", "c", "d", "e"]

    def test_vertical_tab_is_not_a_separator(self) -> None:
        assert split_alt_words("a\vb") == ["a\vb"]

    def test_unicode_space_is_not_a_separator(self) -> None:
        assert split_alt_words("a\u00a0b c") == ["a\u00a0b", "c"]
