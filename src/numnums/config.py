"""ContextVar-based scan configuration for numnums.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Extractor instance (or explicitly by the caller) and
read by the scanner for the duration of a call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Via the Extractor class
    extractor = Extractor(stop_at_first_failure=True)
    result = extractor.links(text)

    # Direct scanner usage
    from numnums.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(max_tokens=10)):
        result = scan_links(text)

    # Or pass config explicitly
    result = scan_links(text, config=ScanConfig(max_tokens=10))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from numnums.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        stop_at_first_failure: End the scan at the first candidate opener that
            does not start a token. By default a failed candidate is retried one
            character later and scanning continues to the end of the input.
        max_tokens: Stop after this many tokens have been accepted
            (None = unlimited).

    """

    stop_at_first_failure: bool = False
    max_tokens: int | None = None

    def __post_init__(self) -> None:
        if self.max_tokens is not None and self.max_tokens < 0:
            raise ConfigError("max_tokens", f"must be >= 0, got {self.max_tokens}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "max_tokens": 5,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_tokens
            5

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(max_tokens=1)):
        ...     result = scan_links("[a](b) [c](d)")
        >>> len(result.tokens)
        1

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
