"""Composite token matchers for markdown links and images.

A link is a bracket pair immediately followed by a paren pair; an image is
the same shape opened by ``![``. Nothing may sit between ``]`` and ``(``.
A failed sub-match short-circuits the whole token.
"""

from __future__ import annotations

from numnums.pairs import ClosingIndex, match_brackets, match_image_brackets, match_parens
from numnums.tokens import ImageToken, LinkToken, Span


def match_link_at(
    source: str, pos: int, closing: ClosingIndex | None = None
) -> tuple[int, LinkToken] | None:
    """Match ``[label](url)`` starting exactly at ``pos``.

    Args:
        source: Full text being scanned
        pos: Offset of the ``[``
        closing: Shared closer lookup when called repeatedly by a scan

    Returns:
        (end, LinkToken) or None

    """
    brackets = match_brackets(source, pos, closing)
    if brackets is None:
        return None
    url_start, label = brackets
    parens = match_parens(source, url_start, closing)
    if parens is None:
        return None
    end, url = parens
    return end, LinkToken(label.text(source), url.text(source), Span(pos, end))


def match_image_at(
    source: str, pos: int, closing: ClosingIndex | None = None
) -> tuple[int, ImageToken] | None:
    """Match ``![alt](url)`` starting exactly at ``pos``.

    Args:
        source: Full text being scanned
        pos: Offset of the ``!``
        closing: Shared closer lookup when called repeatedly by a scan

    Returns:
        (end, ImageToken) or None

    """
    brackets = match_image_brackets(source, pos, closing)
    if brackets is None:
        return None
    url_start, alt = brackets
    parens = match_parens(source, url_start, closing)
    if parens is None:
        return None
    end, url = parens
    return end, ImageToken(alt.text(source), url.text(source), Span(pos, end))


__all__ = ["match_link_at", "match_image_at"]
