"""Charset helpers for ``Content-Type`` values.

Charsets are represented by Python's canonical codec name (for example
``"utf-8"`` or ``"iso8859-1"``), so the result can be passed straight to
``bytes.decode``.
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING

from httpcontract.errors import UnsupportedCharsetError
from httpcontract.http.headers import CONTENT_TYPE

if TYPE_CHECKING:
    from httpcontract.http.request import HttpMessage

DEFAULT_CHARSET = "utf-8"

CHARSET_PARAMETER = "charset"


def normalize_charset(name: str) -> str:
    """Return the canonical codec name for a charset label.

    Raises:
        UnsupportedCharsetError: If Python has no text codec for the label.

    Example:
        >>> normalize_charset("ISO-8859-1")
        'iso8859-1'
    """
    label = name.strip()
    try:
        # Rejects binary transforms such as "base64" as well as unknown names.
        "".encode(label)
        return codecs.lookup(label).name
    except (LookupError, ValueError):
        raise UnsupportedCharsetError(label) from None


def content_type_parameters(content_type: str) -> dict[str, str]:
    """Parse the ``;``-separated parameters of a media type, lowercasing names."""
    params: dict[str, str] = {}
    for chunk in content_type.split(";")[1:]:
        name, sep, value = chunk.partition("=")
        if not sep:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        params.setdefault(name.strip().lower(), value)
    return params


def charset_from_content_type(content_type: str | None) -> str | None:
    """Extract and normalize the charset parameter of a content type.

    Returns None when there is no content type or no non-empty charset
    parameter.

    Raises:
        UnsupportedCharsetError: If a charset is named but unknown.
    """
    if not content_type:
        return None
    charset = content_type_parameters(content_type).get(CHARSET_PARAMETER, "")
    if not charset:
        return None
    return normalize_charset(charset)


def resolve_charset(message: HttpMessage) -> str | None:
    """Read the charset declared by a message's ``Content-Type`` header.

    Raises:
        UnsupportedCharsetError: If the declared charset is unknown.
    """
    return charset_from_content_type(message.headers.find_first(CONTENT_TYPE))
