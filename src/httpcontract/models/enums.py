"""Enumerations for httpcontract.

This module defines the enum types used by the request contract to
prevent magic strings.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP request methods.

    Example:
        >>> HttpMethod.parse("post")
        <HttpMethod.POST: 'POST'>
        >>> HttpMethod.GET.permits_request_body()
        False
    """

    OPTIONS = "OPTIONS"
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
    PATCH = "PATCH"
    CUSTOM = "CUSTOM"

    @classmethod
    def parse(cls, value: str) -> "HttpMethod":
        """Parse a method name case-insensitively.

        Raises:
            ValueError: If the name is not a standard HTTP method.
        """
        return cls(value.strip().upper())

    @classmethod
    def lookup(cls, value: str) -> "HttpMethod":
        """Like :meth:`parse`, but extension methods such as ``PROPFIND`` map to CUSTOM."""
        try:
            return cls.parse(value)
        except ValueError:
            return cls.CUSTOM

    def permits_request_body(self) -> bool:
        """Check if requests with this method may carry a body."""
        return self in (
            HttpMethod.POST,
            HttpMethod.PUT,
            HttpMethod.PATCH,
            HttpMethod.DELETE,
            HttpMethod.CUSTOM,
        )
