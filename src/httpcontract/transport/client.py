"""Outbound request factory backed by httpx.

``HttpxRequestFactory`` is the factory published under the
``httpcontract.request_factories`` entry point, so installing this
package makes ``httpcontract.get`` and ``httpcontract.post`` work without
further wiring. Requests it builds are plain mutable requests;
:func:`to_httpx_request` turns any ``HttpRequest`` into an
``httpx.Request`` ready for ``httpx.Client.send``.

Example:
    >>> factory = HttpxRequestFactory(base_url="https://api.example.com")
    >>> request = factory.post("/orders", {"sku": "A-1"})
    >>> factory.build(request).url
    URL('https://api.example.com/orders')
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from httpcontract.errors import InvalidArgumentError
from httpcontract.http.headers import CONTENT_TYPE, COOKIE
from httpcontract.http.request import HttpRequest
from httpcontract.models.enums import HttpMethod
from httpcontract.transport.simple import SimpleMutableHttpRequest

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


def _encode_body(request: HttpRequest[Any]) -> tuple[bytes | None, str | None]:
    """Serialize a request body, returning ``(content, default content type)``."""
    body = request.body
    if body is None:
        return None, None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body), None
    if isinstance(body, str):
        charset = request.character_encoding
        return body.encode(charset), f"{TEXT_CONTENT_TYPE}; charset={charset}"
    if isinstance(body, BaseModel):
        return body.model_dump_json().encode("utf-8"), JSON_CONTENT_TYPE
    if isinstance(body, (dict, list, tuple, int, float, bool)):
        return json.dumps(body, separators=(",", ":")).encode("utf-8"), JSON_CONTENT_TYPE
    raise TypeError(f"Unsupported request body type: {type(body).__name__}")


def to_httpx_request(request: HttpRequest[Any], base_url: str | None = None) -> httpx.Request:
    """Convert a request into an ``httpx.Request``.

    Headers keep their order and repeated values. Cookies are rendered into
    a single ``Cookie`` header. A body without a declared ``Content-Type``
    gets one matching how it was serialized.

    Raises:
        TypeError: If the body cannot be serialized.
    """
    url = httpx.URL(base_url).join(request.uri) if base_url else httpx.URL(request.uri)

    headers: list[tuple[str, str]] = [
        (name, value)
        for name in request.headers.names()
        if name.lower() != COOKIE.lower()
        for value in request.headers.get_all(name)
    ]
    cookies = request.cookies.get_all()
    if cookies:
        headers.append((COOKIE, "; ".join(f"{c.name}={c.value}" for c in cookies)))

    content, content_type = _encode_body(request)
    if content_type and request.headers.find_first(CONTENT_TYPE) is None:
        headers.append((CONTENT_TYPE, content_type))

    return httpx.Request(request.method.value, url, headers=headers, content=content)


class HttpxRequestFactory:
    """Request factory for outbound calls made with httpx.

    Attributes:
        base_url: Optional base that relative request URIs are joined to
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    def get(self, uri: str) -> SimpleMutableHttpRequest[Any]:
        return SimpleMutableHttpRequest(HttpMethod.GET, uri)

    def post(self, uri: str, body: T) -> SimpleMutableHttpRequest[T]:
        if body is None:
            raise InvalidArgumentError("body")
        return SimpleMutableHttpRequest(HttpMethod.POST, uri, body=body)

    def build(self, request: HttpRequest[Any]) -> httpx.Request:
        """Convert ``request`` into an ``httpx.Request`` against ``base_url``."""
        return to_httpx_request(request, base_url=self.base_url)
