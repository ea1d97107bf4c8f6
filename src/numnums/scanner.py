"""Scanning aggregator: find every link or image token in a text.

The scanner is a small state machine over a single forward cursor:

    Scanning --(opener found)--> MatchAttempt --> Accepted | Rejected | Failed
    Accepted / Rejected / Failed --> Scanning
    Scanning --(no opener left)--> Done

Link mode looks for ``[``. A ``[`` directly preceded by ``!`` is the start of
an image: if the image matches, the occurrence is rejected and the cursor
jumps past the whole image; otherwise it is a failed candidate. Image mode
looks for ``![`` and needs no such check.

A failed candidate advances the cursor one character past the opener, so
every later opener is still tried and the loop always makes progress.
An image found by image mode is not always rejected by link mode: when a
link's label or URL runs into the image (``[x![a](b)``), link mode accepts
the link and never visits the image's ``[``. Every image's ``[`` is either
the site of a rejection or lies inside an accepted link or a rejected image.

Closing-character lookups are shared across attempts through a
ClosingIndex, so a scan stays linear in the input length even when every
candidate fails.

Thread Safety:
    Scanner instances are single-use. Create one per source string.
    All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto

from numnums.charsets import IMAGE_MARKER
from numnums.composite import match_image_at, match_link_at
from numnums.config import ScanConfig, get_scan_config
from numnums.delimiters import Delimiter
from numnums.pairs import ClosingIndex
from numnums.profiling import get_scan_accumulator
from numnums.tokens import ImageToken, LinkToken, ScanResult, Span, Token
from numnums.utils.logger import get_logger

logger = get_logger(__name__)


class ScanMode(Enum):
    """Which token kind a Scanner collects."""

    LINKS = auto()
    IMAGES = auto()


class Scanner:
    """Single-pass token scanner.

    Usage:
        >>> scanner = Scanner("[a](b) ![c](d)", ScanMode.LINKS)
        >>> list(scanner.tokenize())
        [LinkToken(label='a', url='b', span=Span(start=0, end=6))]
        >>> scanner.rejected
        1

    """

    __slots__ = (
        "_source",
        "_mode",
        "_config",
        "_closing",
        "_start",
        "_pos",
        "_consumed",  # End of the last accepted or rejected token
        "_candidates",
        "_rejected_spans",
        "_accepted",
        "_done",
    )

    def __init__(
        self,
        source: str,
        mode: ScanMode,
        pos: int = 0,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            source: Text to scan
            mode: Collect links or images
            pos: Offset to start scanning from
            config: Scan configuration (defaults to the active context config)
        """
        if pos < 0 or pos > len(source):
            raise ValueError(f"start offset {pos} outside source of length {len(source)}")
        self._source = source
        self._mode = mode
        self._config = config if config is not None else get_scan_config()
        self._closing = ClosingIndex(source)
        self._start = pos
        self._pos = pos
        self._consumed = pos
        self._candidates = 0
        self._rejected_spans: list[Span] = []
        self._accepted = 0
        self._done = False

    @property
    def remainder(self) -> str:
        """Input suffix after the last accepted or rejected token."""
        return self._source[self._consumed :]

    @property
    def candidates(self) -> int:
        return self._candidates

    @property
    def rejected(self) -> int:
        return len(self._rejected_spans)

    @property
    def rejected_spans(self) -> list[Span]:
        """Spans of the images link mode stepped over, in order."""
        return list(self._rejected_spans)

    def tokenize(self) -> Iterator[Token]:
        """Yield accepted tokens in order of appearance.

        Yields:
            LinkToken (link mode) or ImageToken (image mode)

        """
        if self._done:
            return
        max_tokens = self._config.max_tokens
        try:
            while True:
                if max_tokens is not None and self._accepted >= max_tokens:
                    break
                match self._mode:
                    case ScanMode.LINKS:
                        token = self._next_link()
                    case ScanMode.IMAGES:
                        token = self._next_image()
                if token is None:
                    break
                self._accepted += 1
                yield token
        finally:
            # Also runs when the consumer closes the generator early
            self._done = True
            self._finish()

    def scan(self) -> ScanResult[Token]:
        """Run the scan to completion and collect the result."""
        tokens = list(self.tokenize())
        return ScanResult(
            remainder=self.remainder,
            tokens=tokens,
            candidates=self._candidates,
            rejected=self.rejected,
        )

    def _next_link(self) -> LinkToken | None:
        source = self._source
        while True:
            bracket = source.find(Delimiter.LEFT_BRACKET, self._pos)
            if bracket == -1:
                return None
            self._candidates += 1

            if bracket > self._start and source[bracket - 1] == IMAGE_MARKER:
                image = match_image_at(source, bracket - 1, self._closing)
                if image is not None:
                    self._rejected_spans.append(image[1].span)
                    self._pos = self._consumed = image[0]
                    continue
            else:
                link = match_link_at(source, bracket, self._closing)
                if link is not None:
                    self._pos = self._consumed = link[0]
                    return link[1]

            if self._config.stop_at_first_failure:
                return None
            self._pos = bracket + 1

    def _next_image(self) -> ImageToken | None:
        source = self._source
        while True:
            opener = source.find(Delimiter.LEFT_IMAGE_BRACKET, self._pos)
            if opener == -1:
                return None
            self._candidates += 1

            image = match_image_at(source, opener, self._closing)
            if image is not None:
                self._pos = self._consumed = image[0]
                return image[1]

            if self._config.stop_at_first_failure:
                return None
            self._pos = opener + 1

    def _finish(self) -> None:
        scanned = len(self._source) - self._start
        logger.debug(
            "%s scan done: %d chars, %d accepted, %d rejected, %d candidates",
            self._mode.name.lower(),
            scanned,
            self._accepted,
            self.rejected,
            self._candidates,
        )
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(
                source_length=scanned,
                token_count=self._accepted,
                candidate_count=self._candidates,
                rejected_count=self.rejected,
            )


def scan_links(
    source: str, pos: int = 0, *, config: ScanConfig | None = None
) -> ScanResult[LinkToken]:
    """Find every markdown link in ``source``, skipping images.

    Never fails; input without links gives an empty token list.

    Example:
        >>> result = scan_links("![i](a) [x](y)")
        >>> [(t.label, t.url) for t in result.tokens]
        [('x', 'y')]

    """
    return Scanner(source, ScanMode.LINKS, pos, config).scan()  # type: ignore[return-value]


def scan_images(
    source: str, pos: int = 0, *, config: ScanConfig | None = None
) -> ScanResult[ImageToken]:
    """Find every markdown image in ``source``.

    Never fails; input without images gives an empty token list.
    """
    return Scanner(source, ScanMode.IMAGES, pos, config).scan()  # type: ignore[return-value]


def iter_links(
    source: str, pos: int = 0, *, config: ScanConfig | None = None
) -> Iterator[LinkToken]:
    """Lazily yield markdown links in order of appearance."""
    return Scanner(source, ScanMode.LINKS, pos, config).tokenize()  # type: ignore[return-value]


def iter_images(
    source: str, pos: int = 0, *, config: ScanConfig | None = None
) -> Iterator[ImageToken]:
    """Lazily yield markdown images in order of appearance."""
    return Scanner(source, ScanMode.IMAGES, pos, config).tokenize()  # type: ignore[return-value]


__all__ = [
    "ScanMode",
    "Scanner",
    "scan_links",
    "scan_images",
    "iter_links",
    "iter_images",
]
