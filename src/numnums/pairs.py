"""Balanced delimiter pair matchers.

A pair is an opening delimiter, some content, and the closing delimiter:

- empty pair:     ``()``  ``[]``  ``![]``
- non-empty pair: ``(x)`` ``[x]`` ``![x]``

Content of a non-empty pair is one or more characters that are not the
closing character. Nesting is not tracked: the opening character may appear
in the content and the first closing character ends the pair. Finding the
closer is a single ``str.find``.

All matchers return ``(end, content_span)`` or None.

A scan that tries many candidates passes a ClosingIndex so repeated
searches for the same closing character reuse earlier results; this keeps a
full scan linear even when every candidate fails.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

from numnums.delimiters import Delimiter, match_delimiter
from numnums.tokens import Span

PairMatch: TypeAlias = tuple[int, Span]


class PairKind(Enum):
    """Delimiter pairs understood by the pair matchers."""

    PARENS = (Delimiter.LEFT_PAREN, Delimiter.RIGHT_PAREN)
    BRACKETS = (Delimiter.LEFT_BRACKET, Delimiter.RIGHT_BRACKET)
    IMAGE_BRACKETS = (Delimiter.LEFT_IMAGE_BRACKET, Delimiter.RIGHT_BRACKET)

    @property
    def opener(self) -> Delimiter:
        return self.value[0]

    @property
    def closer(self) -> Delimiter:
        return self.value[1]


class ClosingIndex:
    """Remembers where the next closing character is, per character.

    A search from ``start`` that found ``idx`` (or nothing, -1) answers any
    later search from ``start2`` with ``start <= start2 <= idx`` (or any
    ``start2 >= start`` when nothing was found) without rescanning.

    Thread Safety:
        Single-use, bound to one scan of one source string.

    """

    __slots__ = ("_source", "_found")

    def __init__(self, source: str) -> None:
        self._source = source
        self._found: dict[str, tuple[int, int]] = {}

    def find(self, char: str, start: int) -> int:
        """Offset of the first ``char`` at or after ``start``, or -1."""
        cached = self._found.get(char)
        if cached is not None:
            searched_from, idx = cached
            if searched_from <= start and (idx == -1 or idx >= start):
                return idx
        idx = self._source.find(char, start)
        self._found[char] = (start, idx)
        return idx


def match_empty_pair(source: str, pos: int, kind: PairKind) -> PairMatch | None:
    """Match an opener immediately followed by its closer.

    Returns:
        (end, empty content span) or None

    """
    content_start = match_delimiter(source, pos, kind.opener)
    if content_start is None:
        return None
    end = match_delimiter(source, content_start, kind.closer)
    if end is None:
        return None
    return end, Span(content_start, content_start)


def match_nonempty_pair(
    source: str, pos: int, kind: PairKind, closing: ClosingIndex | None = None
) -> PairMatch | None:
    """Match an opener, one or more non-closer characters, and the closer.

    Args:
        closing: Shared closer lookup for repeated matching over one source

    Returns:
        (end, content span) or None

    """
    content_start = match_delimiter(source, pos, kind.opener)
    if content_start is None:
        return None
    if closing is not None:
        close = closing.find(kind.closer, content_start)
    else:
        close = source.find(kind.closer, content_start)
    if close <= content_start:
        # -1: never closed; == content_start: nothing between
        return None
    return close + 1, Span(content_start, close)


def match_pair(
    source: str, pos: int, kind: PairKind, closing: ClosingIndex | None = None
) -> PairMatch | None:
    """Match either a non-empty or an empty pair (first success wins)."""
    return match_nonempty_pair(source, pos, kind, closing) or match_empty_pair(source, pos, kind)


def match_parens(
    source: str, pos: int, closing: ClosingIndex | None = None
) -> PairMatch | None:
    """Match ``()`` or ``(something)``."""
    return match_pair(source, pos, PairKind.PARENS, closing)


def match_brackets(
    source: str, pos: int, closing: ClosingIndex | None = None
) -> PairMatch | None:
    """Match ``[]`` or ``[something]``."""
    return match_pair(source, pos, PairKind.BRACKETS, closing)


def match_image_brackets(
    source: str, pos: int, closing: ClosingIndex | None = None
) -> PairMatch | None:
    """Match ``![]`` or ``![something]``."""
    return match_pair(source, pos, PairKind.IMAGE_BRACKETS, closing)


__all__ = [
    "ClosingIndex",
    "PairKind",
    "PairMatch",
    "match_empty_pair",
    "match_nonempty_pair",
    "match_pair",
    "match_parens",
    "match_brackets",
    "match_image_brackets",
]
