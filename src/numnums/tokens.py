"""Typed tokens and match results for numnums.

Uses NamedTuples throughout, providing:
- Immutability by default (results are safe to share across threads)
- Tuple unpacking support (``remainder, value = match_parens("(x)")``)
- Lower memory footprint than dataclasses

Offsets are half-open ``[start, end)`` positions into the original source
string. Matchers pass offsets around and only slice text when a token is
built.

Usage:
    from numnums.tokens import LinkToken, Span

    token = LinkToken(label="docs", url="https://x", span=Span(0, 17))
    match token:
        case LinkToken(label=label, url=url):
            print(f"{label} -> {url}")

"""

from __future__ import annotations

from typing import Generic, Literal, NamedTuple, TypeAlias, TypeVar

T = TypeVar("T")


class Span(NamedTuple):
    """Half-open range of offsets into a source string.

    May be empty (``start == end``), e.g. the content of ``[]``.

    Attributes:
        start: Offset of the first character.
        end: Offset just past the last character.

    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.end == self.start

    def text(self, source: str) -> str:
        """Slice this span out of ``source`` (creates new string)."""
        return source[self.start : self.end]


class LinkToken(NamedTuple):
    """Markdown link ``[label](url)``.

    Attributes:
        label: Text between the brackets.
        url: Text between the parens.
        span: Offsets of the whole token, delimiters included.

    """

    label: str
    url: str
    span: Span

    @property
    def type(self) -> Literal["link"]:
        """Token type identifier for dispatch."""
        return "link"


class ImageToken(NamedTuple):
    """Markdown image ``![alt](url)``.

    Attributes:
        alt: Text between ``![`` and ``]``.
        url: Text between the parens.
        span: Offsets of the whole token, starting at the ``!``.

    """

    alt: str
    url: str
    span: Span

    @property
    def type(self) -> Literal["image"]:
        """Token type identifier for dispatch."""
        return "image"


Token: TypeAlias = LinkToken | ImageToken


class Match(NamedTuple, Generic[T]):
    """Result of a single-token matcher.

    Attributes:
        remainder: Input left after the match.
        value: What was matched.

    """

    remainder: str
    value: T


class ScanResult(NamedTuple, Generic[T]):
    """Result of scanning a whole input for tokens.

    Attributes:
        remainder: Input suffix after the last accepted or rejected token.
        tokens: Accepted tokens in order of appearance.
        candidates: Number of opening delimiters examined.
        rejected: Number of link-shaped occurrences rejected as images.

    """

    remainder: str
    tokens: list[T]
    candidates: int = 0
    rejected: int = 0


__all__ = [
    "Span",
    "LinkToken",
    "ImageToken",
    "Token",
    "Match",
    "ScanResult",
]
