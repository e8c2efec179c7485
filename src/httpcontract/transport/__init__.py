"""Concrete request implementations.

- simple: in-memory immutable and mutable requests, plus a plain factory
- asgi: server-side adapter over Starlette/FastAPI requests
- client: httpx-backed request factory (the installed entry point)
"""

from httpcontract.transport.asgi import StarletteHeaders, StarletteHttpRequest
from httpcontract.transport.client import HttpxRequestFactory, to_httpx_request
from httpcontract.transport.simple import (
    SimpleHttpRequest,
    SimpleHttpRequestFactory,
    SimpleMutableHttpRequest,
)

__all__ = [
    "HttpxRequestFactory",
    "SimpleHttpRequest",
    "SimpleHttpRequestFactory",
    "SimpleMutableHttpRequest",
    "StarletteHeaders",
    "StarletteHttpRequest",
    "to_httpx_request",
]
