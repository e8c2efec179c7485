"""Observability helpers for httpcontract.

Example:
    >>> from httpcontract.observability import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("httpcontract.charset.unsupported", charset="bogus-xyz")
"""

from httpcontract.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
