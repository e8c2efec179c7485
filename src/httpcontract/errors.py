"""httpcontract error taxonomy.

This module defines the error hierarchy for the request contract,
providing structured errors with codes and context information.

Only configuration problems and invalid arguments surface as errors.
Malformed negotiation headers never raise; they are absorbed by the
resolvers and replaced by documented defaults.
"""

from __future__ import annotations

from typing import Any


class HttpContractError(Exception):
    """Base exception for all httpcontract errors.

    Attributes:
        code: Error code following the httpcontract:<area>/<reason> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NoRequestFactoryError(HttpContractError, RuntimeError):
    """Raised when no request factory implementation can be found.

    This is a configuration fault, not a transient one: an HTTP client
    implementation (an ``httpcontract.request_factories`` entry point or an
    explicitly registered factory) is missing from the process.

    Example:
        >>> try:
        ...     raise NoRequestFactoryError()
        ... except RuntimeError as exc:
        ...     exc.code
        'httpcontract:config/no_request_factory'
    """

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="httpcontract:config/no_request_factory",
            message="No HTTP client implementation found",
            details=details,
        )


class InvalidRequestFactoryError(HttpContractError, RuntimeError):
    """Raised when a configured factory target cannot be loaded or used.

    Attributes:
        target: The ``module:attribute`` reference or entry point name
        reason: Why the target was rejected
    """

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(
            code="httpcontract:config/invalid_request_factory",
            message=f"Invalid request factory '{target}': {reason}",
            details={"target": target, "reason": reason},
        )
        self.target = target
        self.reason = reason


class InvalidArgumentError(HttpContractError, ValueError):
    """Raised when a required argument is missing or invalid.

    Attributes:
        argument: Name of the offending argument
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        super().__init__(
            code="httpcontract:argument/invalid",
            message=message or f"Argument [{argument}] cannot be null",
            details={"argument": argument},
        )
        self.argument = argument


class UnsupportedCharsetError(HttpContractError, LookupError):
    """Raised by the charset helpers for a charset Python has no codec for.

    The request-level resolver catches this and falls back to UTF-8.

    Attributes:
        charset: The charset name as it appeared in the header
    """

    def __init__(self, charset: str) -> None:
        super().__init__(
            code="httpcontract:charset/unsupported",
            message=f"Unsupported charset: {charset!r}",
            details={"charset": charset},
        )
        self.charset = charset
