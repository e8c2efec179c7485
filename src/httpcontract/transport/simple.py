"""In-memory request implementations.

``SimpleHttpRequest`` is an immutable request built from plain values,
handy for tests and for transports that parse requests themselves.
``SimpleMutableHttpRequest`` is the client-side builder returned by the
request factories; ``freeze()`` snapshots it into an immutable request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar
from urllib.parse import SplitResult, urlsplit, urlunsplit

from httpcontract.errors import InvalidArgumentError
from httpcontract.http.cookies import RequestCookies
from httpcontract.http.headers import (
    COOKIE,
    HOST,
    Headers,
    HeaderSource,
    HeadersView,
    HttpHeaders,
)
from httpcontract.http.negotiation import resolve_character_encoding, resolve_locale
from httpcontract.http.parameters import QueryParameters
from httpcontract.http.request import path_of
from httpcontract.models.entities import Cookie, SocketAddress
from httpcontract.models.enums import HttpMethod
from httpcontract.models.locale import Locale

B = TypeVar("B")

SECURE_SCHEMES = frozenset({"https", "wss"})


def _split(uri: str) -> SplitResult | None:
    try:
        return urlsplit(uri)
    except ValueError:
        return None


def _server_name_for(uri: str, headers: Headers) -> str | None:
    """Host named by the ``Host`` header, else by the URI. Malformed values are skipped."""
    host = headers.find_first(HOST)
    if host:
        parts = _split(f"//{host.strip()}")
        if parts is not None and parts.hostname:
            return parts.hostname
    parts = _split(uri)
    return parts.hostname if parts is not None else None


def _scheme_of(uri: str) -> str:
    parts = _split(uri)
    if parts is not None:
        return parts.scheme
    scheme, sep, _ = uri.partition("://")
    return scheme.lower() if sep else ""


class _SimpleRequestBase(Generic[B]):
    def __init__(
        self,
        method: HttpMethod | str,
        uri: str,
        *,
        headers: HeaderSource | Headers = None,
        body: B | None = None,
        cookies: RequestCookies | None = None,
        remote_address: SocketAddress | None = None,
        server_address: SocketAddress | None = None,
        server_name: str | None = None,
        secure: bool | None = None,
    ) -> None:
        self._method = HttpMethod.parse(method)
        self._uri = uri
        self._headers = headers.copy() if isinstance(headers, Headers) else Headers(headers)
        self._body = body
        self._headers_view = HeadersView(self._headers)
        self._explicit_cookies = cookies.get_all() if cookies is not None else []
        self._cookies = (
            cookies
            if cookies is not None
            else RequestCookies.from_headers(self._headers.get_all(COOKIE))
        )
        self._remote_address = remote_address
        self._server_address = server_address
        self._server_name = server_name
        self._secure = secure

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def path(self) -> str:
        return path_of(self._uri)

    @property
    def headers(self) -> HttpHeaders:
        return self._headers_view

    @property
    def body(self) -> B | None:
        return self._body

    @property
    def cookies(self) -> RequestCookies:
        return self._cookies

    @property
    def parameters(self) -> QueryParameters:
        return QueryParameters.from_uri(self._uri)

    @property
    def remote_address(self) -> SocketAddress | None:
        return self._remote_address

    @property
    def server_address(self) -> SocketAddress | None:
        return self._server_address

    @property
    def server_name(self) -> str | None:
        if self._server_name is not None:
            return self._server_name
        return _server_name_for(self._uri, self._headers)

    @property
    def is_secure(self) -> bool:
        if self._secure is not None:
            return self._secure
        return _scheme_of(self._uri) in SECURE_SCHEMES

    @property
    def locale(self) -> Locale | None:
        return resolve_locale(self)

    @property
    def character_encoding(self) -> str:
        return resolve_character_encoding(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._method.value} {self._uri})"


class SimpleHttpRequest(_SimpleRequestBase[B]):
    """An immutable request assembled from plain values.

    Headers are exposed through a read-only ``HeadersView``. When ``secure``
    is not given it is inferred from the URI scheme, and ``server_name``
    falls back to the ``Host`` header or the URI host.

    Example:
        >>> request = SimpleHttpRequest.of(
        ...     "POST",
        ...     "https://api.example.com/orders?dry_run=1",
        ...     headers={"Content-Type": "application/json; charset=latin-1"},
        ...     body=b"{}",
        ... )
        >>> request.is_secure, request.character_encoding
        (True, 'iso8859-1')
    """

    @classmethod
    def of(
        cls,
        method: HttpMethod | str,
        uri: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        **kwargs: Any,
    ) -> SimpleHttpRequest[Any]:
        return cls(method, uri, headers=headers, body=body, **kwargs)


class SimpleMutableHttpRequest(_SimpleRequestBase[B]):
    """A request under construction. Mutators return ``self`` for chaining.

    Example:
        >>> request = SimpleMutableHttpRequest(HttpMethod.GET, "/search")
        >>> request.set_parameter("q", "shoes").set_header("Accept-Language", "de").uri
        '/search?q=shoes'
    """

    @property
    def headers(self) -> Headers:
        return self._headers

    def _sync_cookies(self, name: str) -> None:
        """Rebuild the cookie store after the ``Cookie`` header changed.

        Cookies added with :meth:`add_cookie` take precedence over the header.
        """
        if name.lower() != COOKIE.lower():
            return
        cookies = RequestCookies.from_headers(self._headers.get_all(COOKIE))
        for cookie in self._explicit_cookies:
            cookies = cookies.with_cookie(cookie)
        self._cookies = cookies

    def set_method(self, method: HttpMethod | str) -> SimpleMutableHttpRequest[B]:
        self._method = HttpMethod.parse(method)
        return self

    def set_uri(self, uri: str) -> SimpleMutableHttpRequest[B]:
        self._uri = uri
        return self

    def set_header(self, name: str, value: str) -> SimpleMutableHttpRequest[B]:
        self._headers.set(name, value)
        self._sync_cookies(name)
        return self

    def add_header(self, name: str, value: str) -> SimpleMutableHttpRequest[B]:
        self._headers.add(name, value)
        self._sync_cookies(name)
        return self

    def remove_header(self, name: str) -> SimpleMutableHttpRequest[B]:
        self._headers.remove(name)
        self._sync_cookies(name)
        return self

    def set_body(self, body: B | None) -> SimpleMutableHttpRequest[B]:
        self._body = body
        return self

    def add_cookie(self, cookie: Cookie) -> SimpleMutableHttpRequest[B]:
        self._explicit_cookies.append(cookie)
        self._cookies = self._cookies.with_cookie(cookie)
        return self

    def set_parameter(self, name: str, *values: str) -> SimpleMutableHttpRequest[B]:
        """Replace every value of query parameter ``name``; no values removes it."""
        parts = urlsplit(self._uri)
        kept = [(k, v) for k, v in QueryParameters.from_query(parts.query).items() if k != name]
        kept.extend((name, value) for value in values)
        query = QueryParameters(kept).to_query()
        self._uri = urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
        return self

    def freeze(self) -> SimpleHttpRequest[B]:
        """Snapshot the current state into an immutable request."""
        return SimpleHttpRequest(
            self._method,
            self._uri,
            headers=self._headers,
            body=self._body,
            cookies=self._cookies,
            remote_address=self._remote_address,
            server_address=self._server_address,
            server_name=self._server_name,
            secure=self._secure,
        )


class SimpleHttpRequestFactory:
    """Request factory producing ``SimpleMutableHttpRequest`` instances."""

    def get(self, uri: str) -> SimpleMutableHttpRequest[Any]:
        return SimpleMutableHttpRequest(HttpMethod.GET, uri)

    def post(self, uri: str, body: B) -> SimpleMutableHttpRequest[B]:
        if body is None:
            raise InvalidArgumentError("body")
        return SimpleMutableHttpRequest(HttpMethod.POST, uri, body=body)
