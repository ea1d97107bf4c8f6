"""Property-based tests for scanning invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from numnums.alt_text import split_alt_words
from numnums.charsets import ASCII_WHITESPACE
from numnums.pairs import match_brackets, match_parens
from numnums.scanner import Scanner, ScanMode, scan_images, scan_links

# Inputs dense in delimiters find far more edge cases than arbitrary text
markdownish = st.text(alphabet="[]()! ab\n", max_size=200)
any_text = st.one_of(markdownish, st.text(max_size=300))


class TestScanInvariants:
    @given(any_text)
    @settings(max_examples=300)
    def test_links_and_images_are_disjoint(self, source: str) -> None:
        """No token start is claimed by both modes."""
        link_starts = {t.span.start for t in scan_links(source).tokens}
        image_starts = {t.span.start for t in scan_images(source).tokens}
        assert not link_starts & image_starts

    @given(markdownish)
    @settings(max_examples=500)
    def test_every_image_is_rejected_or_covered_by_link_mode(self, source: str) -> None:
        """Each image's ``[`` is rejected by link mode or lies inside a span it consumed."""
        scanner = Scanner(source, ScanMode.LINKS)
        links = list(scanner.tokenize())
        rejected = scanner.rejected_spans
        consumed = [t.span for t in links] + rejected
        rejected_starts = {span.start for span in rejected}
        for image in scan_images(source).tokens:
            bracket = image.span.start + 1
            assert image.span.start in rejected_starts or any(
                span.start < bracket < span.end for span in consumed
            )

    @given(markdownish)
    @settings(max_examples=300)
    def test_rejected_occurrences_are_images(self, source: str) -> None:
        scanner = Scanner(source, ScanMode.LINKS)
        scanner.scan()
        for span in scanner.rejected_spans:
            assert source[span.start : span.start + 2] == "!["
            assert span.text(source).endswith(")")

    @given(any_text)
    @settings(max_examples=300)
    def test_link_never_follows_bang(self, source: str) -> None:
        for token in scan_links(source).tokens:
            start = token.span.start
            assert start == 0 or source[start - 1] != "!"

    @given(any_text)
    @settings(max_examples=300)
    def test_spans_reconstruct_tokens(self, source: str) -> None:
        for link in scan_links(source).tokens:
            assert link.span.text(source) == f"[{link.label}]({link.url})"
        for image in scan_images(source).tokens:
            assert image.span.text(source) == f"![{image.alt}]({image.url})"

    @given(any_text)
    @settings(max_examples=200)
    def test_tokens_are_ordered_and_non_overlapping(self, source: str) -> None:
        for result in (scan_links(source), scan_images(source)):
            previous_end = 0
            for token in result.tokens:
                assert token.span.start >= previous_end
                assert token.span.end > token.span.start
                previous_end = token.span.end

    @given(any_text)
    @settings(max_examples=200)
    def test_rescanning_remainder_finds_nothing(self, source: str) -> None:
        links = scan_links(source)
        assert source.endswith(links.remainder)
        assert scan_links(links.remainder).tokens == []

        images = scan_images(source)
        assert source.endswith(images.remainder)
        assert scan_images(images.remainder).tokens == []

    @given(markdownish)
    @settings(max_examples=200)
    def test_each_candidate_counted_once(self, source: str) -> None:
        result = scan_links(source)
        assert len(result.tokens) + result.rejected <= result.candidates
        assert result.candidates <= source.count("[")


class TestPairInvariants:
    @given(markdownish)
    @settings(max_examples=200)
    def test_bracket_content_excludes_closer(self, source: str) -> None:
        result = match_brackets(source, 0)
        if result is not None:
            end, content = result
            assert "]" not in content.text(source)
            assert source[end - 1] == "]"

    @given(markdownish)
    @settings(max_examples=200)
    def test_paren_content_excludes_closer(self, source: str) -> None:
        result = match_parens(source, 0)
        if result is not None:
            end, content = result
            assert ")" not in content.text(source)
            assert content.end == end - 1


class TestAltWordInvariants:
    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_words_are_non_empty_and_whitespace_free(self, alt: str) -> None:
        for word in split_alt_words(alt):
            assert word
            assert not set(word) & ASCII_WHITESPACE

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_joining_and_resplitting_is_stable(self, alt: str) -> None:
        words = split_alt_words(alt)
        assert split_alt_words(" ".join(words)) == words
