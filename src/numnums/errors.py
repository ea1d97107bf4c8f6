"""Exception classes for numnums.

Matchers are composed freely, so failure carries no diagnostic payload:
a ``NoMatch`` only says "the expected pattern is not at this position".
"""

from __future__ import annotations


class NumnumsError(Exception):
    """Base exception for all numnums errors.

    Subclass this for specific error categories.
    """

    pass


class NoMatch(NumnumsError):
    """The expected pattern was not found at the current position.

    Raised by the single-token matchers (``match_parens``,
    ``match_link_token``, ...). The scanning functions never raise it;
    they report zero tokens instead.
    """

    def __init__(self) -> None:
        super().__init__("no match")

    def __reduce__(self) -> tuple[type[NoMatch], tuple[()]]:
        return (type(self), ())


class ConfigError(NumnumsError):
    """Invalid scan configuration value."""

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending ScanConfig field
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
