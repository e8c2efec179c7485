"""Content negotiation: preferred locale and body charset.

Both resolvers are recomputed from headers on every call and never raise
for malformed header input.
"""

from __future__ import annotations

import locale as _process_locale
import os

from httpcontract.errors import UnsupportedCharsetError
from httpcontract.http.charset import DEFAULT_CHARSET, resolve_charset
from httpcontract.http.headers import ACCEPT_LANGUAGE
from httpcontract.http.request import HttpMessage
from httpcontract.models.locale import Locale
from httpcontract.observability import get_logger

logger = get_logger(__name__)

ENV_DEFAULT_LOCALE = "HTTPCONTRACT_DEFAULT_LOCALE"
FALLBACK_LOCALE_TAG = "en"
WILDCARD = "*"


def default_locale_tag() -> str:
    """Language tag of the process default locale.

    Uses HTTPCONTRACT_DEFAULT_LOCALE when set, otherwise the locale of the
    running process, otherwise ``en``.
    """
    configured = os.environ.get(ENV_DEFAULT_LOCALE, "").strip()
    if configured:
        return configured
    try:
        name = _process_locale.getlocale()[0]
    except ValueError:
        name = None
    if not name or name in ("C", "POSIX"):
        return FALLBACK_LOCALE_TAG
    return name.replace("_", "-")


def resolve_locale(message: HttpMessage, default_locale: str | None = None) -> Locale | None:
    """Derive the preferred locale from the first ``Accept-Language`` value.

    Only the first offered language is used; quality values are ignored.
    An empty or ``*`` value selects ``default_locale`` (or the process
    default). A missing header yields None.

    Example:
        >>> from httpcontract.transport.simple import SimpleHttpRequest
        >>> request = SimpleHttpRequest.of("GET", "/", headers={"Accept-Language": "fr,en-US"})
        >>> resolve_locale(request).to_language_tag()
        'fr'
    """
    text = message.headers.find_first(ACCEPT_LANGUAGE)
    if text is None:
        return None

    text = text.strip()
    if not text or text == WILDCARD:
        text = default_locale or default_locale_tag()
    else:
        text = text.split(";", 1)[0]
        text = text.split(",", 1)[0]

    resolved = Locale.for_language_tag(text)
    if resolved.is_undetermined():
        logger.debug("httpcontract.locale.malformed", tag=text)
    return resolved


def resolve_character_encoding(message: HttpMessage, default: str = DEFAULT_CHARSET) -> str:
    """Charset declared by ``Content-Type``, or ``default`` when absent or unsupported."""
    try:
        charset = resolve_charset(message)
    except UnsupportedCharsetError as exc:
        logger.debug("httpcontract.charset.unsupported", charset=exc.charset, fallback=default)
        charset = None
    return charset or default
