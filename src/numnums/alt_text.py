"""Split markdown image alt text into words.

Words are separated by runs of ASCII whitespace (space, tab, newline, form
feed, carriage return). Punctuation stays attached to its word, and other
whitespace such as vertical tab or no-break space is part of a word.

Example:
    >>> split_alt_words("I am great.  Thanks!")
    ['I', 'am', 'great.', 'Thanks!']
"""

from __future__ import annotations

import re

from numnums.charsets import ASCII_WHITESPACE

_ASCII_WHITESPACE_RUN = re.compile("[" + re.escape("".join(sorted(ASCII_WHITESPACE))) + "]+")


def split_alt_words(alt: str) -> list[str]:
    """Split alt text on runs of ASCII whitespace.

    Never fails; empty or all-whitespace text gives an empty list.
    """
    return [word for word in _ASCII_WHITESPACE_RUN.split(alt) if word]


__all__ = ["split_alt_words"]
