"""httpcontract: a transport-independent HTTP request contract.

Code written against ``HttpRequest`` works with any request implementation
(Starlette/FastAPI, the in-memory requests, test doubles), and outbound
requests are built through whichever request factory the process has.

Example:
    >>> import httpcontract
    >>> request = httpcontract.get("https://example.com/status")
    >>> request.method
    <HttpMethod.GET: 'GET'>
"""

from httpcontract.errors import (
    HttpContractError,
    InvalidArgumentError,
    InvalidRequestFactoryError,
    NoRequestFactoryError,
    UnsupportedCharsetError,
)
from httpcontract.http import (
    HttpHeaders,
    HttpMessage,
    HttpRequest,
    HttpRequestFactory,
    MutableHttpRequest,
    RequestFactoryRegistry,
    get,
    post,
    register_factory,
    resolve_character_encoding,
    resolve_locale,
)
from httpcontract.models import HttpMethod, Locale, SocketAddress

__version__ = "0.1.0"

__all__ = [
    "HttpContractError",
    "HttpHeaders",
    "HttpMessage",
    "HttpMethod",
    "HttpRequest",
    "HttpRequestFactory",
    "InvalidArgumentError",
    "InvalidRequestFactoryError",
    "Locale",
    "MutableHttpRequest",
    "NoRequestFactoryError",
    "RequestFactoryRegistry",
    "SocketAddress",
    "UnsupportedCharsetError",
    "__version__",
    "get",
    "post",
    "register_factory",
    "resolve_character_encoding",
    "resolve_locale",
]
