"""Server-side adapter over Starlette requests.

Wraps ``starlette.requests.Request`` (and therefore FastAPI's ``Request``)
so application code can depend on the ``HttpRequest`` contract instead of
the framework type.

Example:
    >>> from starlette.requests import Request
    >>> async def endpoint(request: Request):
    ...     wrapped = await StarletteHttpRequest.from_request(request)
    ...     return wrapped.locale, wrapped.character_encoding
"""

from __future__ import annotations

from urllib.parse import SplitResult

from starlette.datastructures import Headers as StarletteHeaderMap
from starlette.requests import Request

from httpcontract.http.cookies import RequestCookies
from httpcontract.http.headers import COOKIE
from httpcontract.http.negotiation import resolve_character_encoding, resolve_locale
from httpcontract.http.parameters import QueryParameters
from httpcontract.models.entities import SocketAddress
from httpcontract.models.enums import HttpMethod
from httpcontract.models.locale import Locale

SECURE_SCHEMES = frozenset({"https", "wss"})


class StarletteHeaders:
    """Header accessor backed by Starlette's immutable header list."""

    def __init__(self, headers: StarletteHeaderMap) -> None:
        self._headers = headers

    def find_first(self, name: str) -> str | None:
        return self._headers.get(name)

    def get_all(self, name: str) -> list[str]:
        return self._headers.getlist(name)

    def names(self) -> list[str]:
        return list(dict.fromkeys(self._headers.keys()))


class StarletteHttpRequest:
    """An ``HttpRequest[bytes]`` view of a Starlette request.

    The URI is the request target (path plus query string). Reading the
    body is asynchronous in Starlette, so pass it in or use
    :meth:`from_request`.
    """

    def __init__(self, request: Request, body: bytes | None = None) -> None:
        self._request = request
        self._body = body
        self._headers = StarletteHeaders(request.headers)
        self._cookies = RequestCookies.from_headers(request.headers.getlist(COOKIE))
        self._parameters = QueryParameters(request.query_params.multi_items())

    @classmethod
    async def from_request(cls, request: Request) -> StarletteHttpRequest:
        """Wrap ``request`` after reading its body."""
        return cls(request, body=await request.body())

    @property
    def request(self) -> Request:
        """The underlying Starlette request."""
        return self._request

    @property
    def method(self) -> HttpMethod:
        """The request method. Extension methods report ``HttpMethod.CUSTOM``."""
        return HttpMethod.lookup(self._request.method)

    @property
    def method_name(self) -> str:
        """The method exactly as sent, including extension methods."""
        return self._request.method

    def _components(self) -> SplitResult | None:
        """The parsed request URL, or None when a malformed ``Host`` breaks it."""
        try:
            return self._request.url.components
        except ValueError:
            return None

    @property
    def uri(self) -> str:
        query = self._request.scope.get("query_string", b"").decode("latin-1")
        return f"{self.path}?{query}" if query else self.path

    @property
    def path(self) -> str:
        parts = self._components()
        return parts.path if parts is not None else self._request.scope.get("path", "/")

    @property
    def headers(self) -> StarletteHeaders:
        return self._headers

    @property
    def body(self) -> bytes | None:
        return self._body

    @property
    def cookies(self) -> RequestCookies:
        return self._cookies

    @property
    def parameters(self) -> QueryParameters:
        return self._parameters

    @property
    def remote_address(self) -> SocketAddress | None:
        return SocketAddress.from_tuple(self._request.client)

    @property
    def server_address(self) -> SocketAddress | None:
        return SocketAddress.from_tuple(self._request.scope.get("server"))

    @property
    def server_name(self) -> str | None:
        parts = self._components()
        return parts.hostname if parts is not None else None

    @property
    def is_secure(self) -> bool:
        parts = self._components()
        scheme = parts.scheme if parts is not None else self._request.scope.get("scheme", "http")
        return scheme in SECURE_SCHEMES

    @property
    def locale(self) -> Locale | None:
        return resolve_locale(self)

    @property
    def character_encoding(self) -> str:
        return resolve_character_encoding(self)
