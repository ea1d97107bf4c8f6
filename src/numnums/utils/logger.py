"""Logger lookup for numnums modules.

Every numnums logger hangs under the ``numnums`` namespace, so one call
turns on the per-scan summaries:

    >>> import logging
    >>> logging.getLogger("numnums").setLevel(logging.DEBUG)

Example:
    >>> from numnums.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("links scan done: %d accepted", 2)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for ``name`` under ``numnums.``.

    Names already inside the namespace (``__name__`` of a numnums module)
    are used as is.

    Example:
        >>> get_logger("numnums.scanner").name
        'numnums.scanner'
        >>> get_logger("extract_links").name
        'numnums.extract_links'
    """
    if name != "numnums" and not name.startswith("numnums."):
        name = f"numnums.{name}"
    return logging.getLogger(name)
