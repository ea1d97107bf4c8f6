"""Benchmark link and image scanning.

Checks that scan time grows linearly with input size, including inputs
made of unmatched delimiters that force a failed candidate at every opener.

Run with:
    uv run python benchmarks/benchmark_scan.py
"""

import time

from numnums import extract_all_images, extract_all_links

CORPORA = {
    "mixed": "text [link](https://x) more ![img](a.png) and [x] (y) " * 2000,
    "unclosed_brackets": "[" * 100_000,
    "unclosed_parens": "[a](" * 25_000,
    "bangs": "![" * 50_000,
    "plain": "no tokens here at all " * 5000,
}


def bench(fn, source: str, iterations: int = 20) -> float:
    """Return mean time per call in milliseconds."""
    fn(source)  # Warmup
    start = time.perf_counter()
    for _ in range(iterations):
        fn(source)
    return (time.perf_counter() - start) / iterations * 1000


def main() -> None:
    print(f"{'corpus':<20} {'chars':>8} {'links ms':>10} {'images ms':>10}")
    for name, source in CORPORA.items():
        links_ms = bench(extract_all_links, source)
        images_ms = bench(extract_all_images, source)
        print(f"{name:<20} {len(source):>8} {links_ms:>10.2f} {images_ms:>10.2f}")


if __name__ == "__main__":
    main()
