"""Transport-specific pytest fixtures.

Builds Starlette requests directly from ASGI scopes, so adapter tests run
without a server or an event loop beyond the test's own.
"""

from collections.abc import Callable
from typing import Any

import pytest
from starlette.requests import Request
from starlette.types import Message

RequestBuilder = Callable[..., Request]


@pytest.fixture
def starlette_request() -> RequestBuilder:
    """Return a builder for Starlette requests.

    The builder accepts ``method``, ``path``, ``query_string``, ``headers``
    (list of ``(name, value)`` str pairs), ``body``, ``scheme``, ``server``
    and ``client``.
    """

    def _build(
        method: str = "GET",
        path: str = "/",
        query_string: str = "",
        headers: list[tuple[str, str]] | None = None,
        body: bytes = b"",
        scheme: str = "http",
        server: Any = ("testserver", 80),
        client: Any = ("203.0.113.9", 51234),
    ) -> Request:
        scope = {
            "type": "http",
            "http_version": "1.1",
            "method": method,
            "scheme": scheme,
            "path": path,
            "raw_path": path.encode("latin-1"),
            "root_path": "",
            "query_string": query_string.encode("latin-1"),
            "headers": [
                (name.lower().encode("latin-1"), value.encode("latin-1"))
                for name, value in headers or []
            ],
            "server": server,
            "client": client,
        }

        async def receive() -> Message:
            return {"type": "http.request", "body": body, "more_body": False}

        return Request(scope, receive)

    return _build
