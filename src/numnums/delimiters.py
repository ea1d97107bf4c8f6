"""Literal delimiter matchers.

Every matcher takes the source and a start offset and returns the offset
just past the delimiter, or None when the source does not begin with it at
that offset. Nothing is consumed on failure.

The set of delimiters is closed, so they are modelled as a StrEnum and
matched with ``str.startswith`` (no regex, no slicing).

Usage:
    >>> from numnums.delimiters import Delimiter, match_delimiter
    >>> match_delimiter("![alt](u)", 0, Delimiter.LEFT_IMAGE_BRACKET)
    2
    >>> match_delimiter("[alt](u)", 0, Delimiter.LEFT_IMAGE_BRACKET) is None
    True
"""

from __future__ import annotations

from enum import StrEnum


class Delimiter(StrEnum):
    """Literal delimiters recognised by the matchers."""

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    LEFT_IMAGE_BRACKET = "!["


def match_delimiter(source: str, pos: int, delimiter: Delimiter) -> int | None:
    """Match a literal delimiter at ``pos``.

    Args:
        source: Full text being scanned
        pos: Offset to match at

    Returns:
        Offset just past the delimiter, or None if it is not at ``pos``

    """
    if source.startswith(delimiter, pos):
        return pos + len(delimiter)
    return None


def left_paren(source: str, pos: int) -> int | None:
    """Match ``(``."""
    return match_delimiter(source, pos, Delimiter.LEFT_PAREN)


def right_paren(source: str, pos: int) -> int | None:
    """Match ``)``."""
    return match_delimiter(source, pos, Delimiter.RIGHT_PAREN)


def left_bracket(source: str, pos: int) -> int | None:
    """Match ``[``."""
    return match_delimiter(source, pos, Delimiter.LEFT_BRACKET)


def right_bracket(source: str, pos: int) -> int | None:
    """Match ``]``."""
    return match_delimiter(source, pos, Delimiter.RIGHT_BRACKET)


def left_image_bracket(source: str, pos: int) -> int | None:
    """Match ``![``."""
    return match_delimiter(source, pos, Delimiter.LEFT_IMAGE_BRACKET)


__all__ = [
    "Delimiter",
    "match_delimiter",
    "left_paren",
    "right_paren",
    "left_bracket",
    "right_bracket",
    "left_image_bracket",
]
