"""The request capability contract.

Every request-like object (server-parsed, client-built, test double)
satisfies these protocols structurally. Nothing here performs I/O.

Implementations provide ``locale`` and ``character_encoding`` by calling
:func:`httpcontract.http.negotiation.resolve_locale` and
:func:`httpcontract.http.negotiation.resolve_character_encoding`.

Example:
    >>> from httpcontract.transport.simple import SimpleHttpRequest
    >>> request = SimpleHttpRequest.of("GET", "/items?page=2")
    >>> isinstance(request, HttpRequest)
    True
    >>> request.path
    '/items'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable
from urllib.parse import urlsplit, urlunsplit

if TYPE_CHECKING:
    from httpcontract.http.cookies import Cookies
    from httpcontract.http.headers import HttpHeaders
    from httpcontract.http.parameters import HttpParameters
    from httpcontract.models.entities import Cookie, SocketAddress
    from httpcontract.models.enums import HttpMethod
    from httpcontract.models.locale import Locale

B = TypeVar("B")


def path_of(uri: str) -> str:
    """Strip query and fragment from a URI, keeping scheme and authority.

    Example:
        >>> path_of("/a/b?x=1#top")
        '/a/b'
        >>> path_of("https://example.com/a?x=1")
        'https://example.com/a'
    """
    try:
        parts = urlsplit(uri)
    except ValueError:
        return uri.partition("#")[0].partition("?")[0]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


@runtime_checkable
class HttpMessage(Protocol[B]):
    """Headers and a typed body."""

    @property
    def headers(self) -> HttpHeaders: ...

    @property
    def body(self) -> B | None: ...


@runtime_checkable
class HttpRequest(HttpMessage[B], Protocol[B]):
    """Common shape of HTTP request implementations."""

    @property
    def method(self) -> HttpMethod: ...

    @property
    def uri(self) -> str:
        """The full request URI, including any query string."""
        ...

    @property
    def path(self) -> str:
        """The URI without query string or fragment."""
        ...

    @property
    def remote_address(self) -> SocketAddress | None: ...

    @property
    def server_address(self) -> SocketAddress | None: ...

    @property
    def server_name(self) -> str | None: ...

    @property
    def is_secure(self) -> bool:
        """True when the request arrived over an encrypted transport."""
        ...

    @property
    def cookies(self) -> Cookies: ...

    @property
    def parameters(self) -> HttpParameters: ...

    @property
    def locale(self) -> Locale | None:
        """Preferred locale from ``Accept-Language``, None if the header is absent."""
        ...

    @property
    def character_encoding(self) -> str:
        """Body charset from ``Content-Type``, defaulting to UTF-8."""
        ...


@runtime_checkable
class MutableHttpRequest(HttpRequest[B], Protocol[B]):
    """A request under construction. Every mutator returns the request itself."""

    def set_method(self, method: HttpMethod | str) -> MutableHttpRequest[B]: ...

    def set_uri(self, uri: str) -> MutableHttpRequest[B]: ...

    def set_header(self, name: str, value: str) -> MutableHttpRequest[B]: ...

    def add_header(self, name: str, value: str) -> MutableHttpRequest[B]: ...

    def set_body(self, body: B | None) -> MutableHttpRequest[B]: ...

    def add_cookie(self, cookie: Cookie) -> MutableHttpRequest[B]: ...

    def set_parameter(self, name: str, *values: str) -> MutableHttpRequest[B]: ...
