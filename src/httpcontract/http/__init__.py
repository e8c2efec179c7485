"""The request contract: headers, cookies, parameters, negotiation, factories."""

from httpcontract.http.charset import (
    DEFAULT_CHARSET,
    charset_from_content_type,
    normalize_charset,
    resolve_charset,
)
from httpcontract.http.cookies import Cookies, RequestCookies
from httpcontract.http.factory import (
    HttpRequestFactory,
    RequestFactoryRegistry,
    discover_request_factory,
    get,
    get_registry,
    post,
    register_factory,
    reset_registry,
    set_registry,
)
from httpcontract.http.headers import Headers, HeadersView, HttpHeaders
from httpcontract.http.negotiation import (
    default_locale_tag,
    resolve_character_encoding,
    resolve_locale,
)
from httpcontract.http.parameters import HttpParameters, QueryParameters
from httpcontract.http.request import HttpMessage, HttpRequest, MutableHttpRequest, path_of

__all__ = [
    "DEFAULT_CHARSET",
    "Cookies",
    "Headers",
    "HeadersView",
    "HttpHeaders",
    "HttpMessage",
    "HttpParameters",
    "HttpRequest",
    "HttpRequestFactory",
    "MutableHttpRequest",
    "QueryParameters",
    "RequestCookies",
    "RequestFactoryRegistry",
    "charset_from_content_type",
    "default_locale_tag",
    "discover_request_factory",
    "get",
    "get_registry",
    "normalize_charset",
    "path_of",
    "post",
    "register_factory",
    "reset_registry",
    "resolve_character_encoding",
    "resolve_charset",
    "resolve_locale",
    "set_registry",
]
