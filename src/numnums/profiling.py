"""numnums ScanAccumulator — opt-in profiling for token scans.

This module provides accumulated metrics across scans:
- Total profiling time
- Source length scanned
- Tokens accepted, candidates examined, occurrences rejected

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from numnums import extract_all_links
    from numnums.profiling import profiled_scan

    with profiled_scan() as metrics:
        extract_all_links("see [docs](https://x) and ![logo](l.png)")

    print(metrics.summary())
    # {"total_ms": 0.05, "scan_calls": 1, "source_length": 40, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of scans recorded.
        source_length: Total length of scanned sources.
        token_count: Tokens accepted across all scans.
        candidate_count: Opening delimiters examined across all scans.
        rejected_count: Link-shaped occurrences rejected as images.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    candidate_count: int = 0
    rejected_count: int = 0

    def record_scan(
        self,
        source_length: int,
        token_count: int,
        candidate_count: int,
        rejected_count: int = 0,
    ) -> None:
        """Record a finished scan."""
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.candidate_count += candidate_count
        self.rejected_count += rejected_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, scan_calls, source_length, token_count,
            candidate_count, rejected_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "candidate_count": self.candidate_count,
            "rejected_count": self.rejected_count,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during scan calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
