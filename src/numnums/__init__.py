"""
numnums — reusable matchers for markdown links and images

Extracts bracket/paren pairs, markdown links ``[text](url)`` and markdown
images ``![alt](url)`` from raw text, keeping links and images apart even
though an image looks like a link with a ``!`` in front.

Quick Start:
    >>> from numnums import extract_all_links, extract_all_images
    >>> text = "see ![logo](l.png) and [the docs](https://x)"
    >>> [(t.label, t.url) for t in extract_all_links(text).tokens]
    [('the docs', 'https://x')]
    >>> [(t.alt, t.url) for t in extract_all_images(text).tokens]
    [('logo', 'l.png')]

    >>> # Single-token matchers raise NoMatch when nothing is there
    >>> from numnums import match_brackets
    >>> match_brackets("[abc] rest")
    Match(remainder=' rest', value='abc')

    >>> # Or bind configuration once with the Extractor class
    >>> from numnums import Extractor
    >>> extractor = Extractor(max_tokens=1)
    >>> len(extractor.links("[a](b) [c](d)").tokens)
    1

Installation:
    pip install numnums              # Core library (zero deps)
"""

from collections.abc import Iterable

from numnums.alt_text import split_alt_words
from numnums.composite import match_image_at, match_link_at
from numnums.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from numnums.errors import ConfigError, NoMatch, NumnumsError
from numnums.pairs import match_brackets as _match_brackets_at
from numnums.pairs import match_parens as _match_parens_at
from numnums.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from numnums.scanner import ScanMode, Scanner, iter_images, iter_links, scan_images, scan_links
from numnums.tokens import ImageToken, LinkToken, Match, ScanResult, Span

__version__ = "0.1.0"


def match_parens(text: str) -> Match[str]:
    """Match ``()`` or ``(something)`` at the start of ``text``.

    Returns:
        Match of (remainder, content)

    Raises:
        NoMatch: ``text`` does not start with a paren pair

    Example:
        >>> match_parens("(abcd)")
        Match(remainder='', value='abcd')
    """
    result = _match_parens_at(text, 0)
    if result is None:
        raise NoMatch()
    end, content = result
    return Match(text[end:], content.text(text))


def match_brackets(text: str) -> Match[str]:
    """Match ``[]`` or ``[something]`` at the start of ``text``.

    Raises:
        NoMatch: ``text`` does not start with a bracket pair
    """
    result = _match_brackets_at(text, 0)
    if result is None:
        raise NoMatch()
    end, content = result
    return Match(text[end:], content.text(text))


def match_link_token(text: str) -> Match[LinkToken]:
    """Match ``[label](url)`` at the start of ``text``.

    Raises:
        NoMatch: ``text`` does not start with a link
    """
    result = match_link_at(text, 0)
    if result is None:
        raise NoMatch()
    end, token = result
    return Match(text[end:], token)


def match_image_token(text: str) -> Match[ImageToken]:
    """Match ``![alt](url)`` at the start of ``text``.

    Raises:
        NoMatch: ``text`` does not start with an image
    """
    result = match_image_at(text, 0)
    if result is None:
        raise NoMatch()
    end, token = result
    return Match(text[end:], token)


def extract_all_links(text: str, *, config: ScanConfig | None = None) -> ScanResult[LinkToken]:
    """Find every markdown link in ``text``, skipping images.

    Never raises NoMatch; text without links gives an empty token list.

    Args:
        text: Complete input text
        config: Scan configuration (defaults to the active context config)

    Returns:
        ScanResult with the links in order of appearance

    Example:
        >>> result = extract_all_links("here's ![image](abcd) here's [a](b)")
        >>> result.tokens[0].label
        'a'
    """
    return scan_links(text, config=config)


def extract_all_images(text: str, *, config: ScanConfig | None = None) -> ScanResult[ImageToken]:
    """Find every markdown image in ``text``.

    Never raises NoMatch; text without images gives an empty token list.
    """
    return scan_images(text, config=config)


def extract_image_alt_words(text: str) -> Match[list[str]]:
    """Match one image at the start of ``text`` and split its alt text.

    The ``remainder`` slot of the result holds the image URL.

    Raises:
        NoMatch: ``text`` does not start with an image

    Example:
        >>> extract_image_alt_words("![I am great.  Thanks!](https://x)")
        Match(remainder='https://x', value=['I', 'am', 'great.', 'Thanks!'])
    """
    _, image = match_image_token(text)
    return Match(image.url, split_alt_words(image.alt))


class Extractor:
    """High-level extractor with configuration bound once.

    Usage:
        >>> extractor = Extractor()
        >>> extractor.links("[a](b) ![c](d)").tokens
        [LinkToken(label='a', url='b', span=Span(start=0, end=6))]

        >>> strict = Extractor(stop_at_first_failure=True)
        >>> strict.links("[x] then [a](b)").tokens
        []

    Thread Safety:
        The bound config is immutable and each call scans with its own
        state. Safe to share one instance across threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        stop_at_first_failure: bool = False,
        max_tokens: int | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize extractor.

        Args:
            stop_at_first_failure: End a scan at the first candidate that
                does not start a token
            max_tokens: Stop after this many tokens (None = unlimited)
            config: Prebuilt ScanConfig; overrides the keyword options
        """
        self._config = config or ScanConfig(
            stop_at_first_failure=stop_at_first_failure,
            max_tokens=max_tokens,
        )

    @property
    def config(self) -> ScanConfig:
        return self._config

    def links(self, text: str) -> ScanResult[LinkToken]:
        """Find every link in ``text``."""
        return scan_links(text, config=self._config)

    def images(self, text: str) -> ScanResult[ImageToken]:
        """Find every image in ``text``."""
        return scan_images(text, config=self._config)

    def alt_words(self, text: str) -> list[list[str]]:
        """Split the alt text of every image in ``text`` into words."""
        return [split_alt_words(image.alt) for image in self.images(text).tokens]

    def links_many(self, texts: Iterable[str]) -> list[ScanResult[LinkToken]]:
        """Scan several texts for links.

        Example:
            >>> results = Extractor().links_many(["[a](b)", "no links"])
            >>> [len(r.tokens) for r in results]
            [1, 0]
        """
        return [scan_links(text, config=self._config) for text in texts]

    def images_many(self, texts: Iterable[str]) -> list[ScanResult[ImageToken]]:
        """Scan several texts for images."""
        return [scan_images(text, config=self._config) for text in texts]


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Single-token matchers
    "match_parens",
    "match_brackets",
    "match_link_token",
    "match_image_token",
    "extract_image_alt_words",
    # Whole-input extraction
    "extract_all_links",
    "extract_all_images",
    "iter_links",
    "iter_images",
    "split_alt_words",
    # Scanner
    "ScanMode",
    "Scanner",
    "scan_links",
    "scan_images",
    # Tokens
    "Span",
    "LinkToken",
    "ImageToken",
    "Match",
    "ScanResult",
    # Errors
    "NumnumsError",
    "NoMatch",
    "ConfigError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # High-level
    "Extractor",
]
