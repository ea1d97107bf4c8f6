"""Tests for literal delimiter matchers."""

import pytest

from numnums.delimiters import (
    Delimiter,
    left_bracket,
    left_image_bracket,
    left_paren,
    match_delimiter,
    right_bracket,
    right_paren,
)


class TestMatchDelimiter:
    """match_delimiter() consumes exactly the literal or nothing."""

    @pytest.mark.parametrize(
        ("delimiter", "source", "expected"),
        [
            (Delimiter.LEFT_PAREN, "(x", 1),
            (Delimiter.RIGHT_PAREN, ")x", 1),
            (Delimiter.LEFT_BRACKET, "[x", 1),
            (Delimiter.RIGHT_BRACKET, "]x", 1),
            (Delimiter.LEFT_IMAGE_BRACKET, "![x", 2),
        ],
    )
    def test_matches_at_start(self, delimiter: Delimiter, source: str, expected: int) -> None:
        assert match_delimiter(source, 0, delimiter) == expected

    def test_matches_at_offset(self) -> None:
        assert match_delimiter("ab[c", 2, Delimiter.LEFT_BRACKET) == 3

    def test_no_match(self) -> None:
        assert match_delimiter("x(", 0, Delimiter.LEFT_PAREN) is None

    def test_empty_source(self) -> None:
        assert match_delimiter("", 0, Delimiter.LEFT_BRACKET) is None

    def test_offset_past_end(self) -> None:
        assert match_delimiter("[", 5, Delimiter.LEFT_BRACKET) is None

    def test_image_bracket_needs_both_chars(self) -> None:
        """A lone ``!`` or ``[`` is not an image opener."""
        assert match_delimiter("!", 0, Delimiter.LEFT_IMAGE_BRACKET) is None
        assert match_delimiter("[", 0, Delimiter.LEFT_IMAGE_BRACKET) is None
        assert match_delimiter("! [", 0, Delimiter.LEFT_IMAGE_BRACKET) is None


class TestNamedHelpers:
    """The named helpers are thin wrappers over match_delimiter()."""

    def test_left_paren(self) -> None:
        assert left_paren("(", 0) == 1
        assert left_paren(")", 0) is None

    def test_right_paren(self) -> None:
        assert right_paren(")", 0) == 1
        assert right_paren("(", 0) is None

    def test_left_bracket(self) -> None:
        assert left_bracket("[", 0) == 1
        assert left_bracket("]", 0) is None

    def test_right_bracket(self) -> None:
        assert right_bracket("]", 0) == 1
        assert right_bracket("[", 0) is None

    def test_left_image_bracket(self) -> None:
        assert left_image_bracket("![", 0) == 2
        assert left_image_bracket("[", 0) is None

    def test_delimiter_is_str(self) -> None:
        assert Delimiter.LEFT_IMAGE_BRACKET == "!["
        assert len(Delimiter.LEFT_IMAGE_BRACKET) == 2
