"""Value models for httpcontract.

Example:
    >>> from httpcontract.models import HttpMethod, Locale
    >>> Locale.for_language_tag("fr").language
    'fr'
"""

from httpcontract.models.base import HttpContractBaseModel
from httpcontract.models.entities import Cookie, SocketAddress
from httpcontract.models.enums import HttpMethod
from httpcontract.models.locale import Locale

__all__ = [
    "Cookie",
    "HttpContractBaseModel",
    "HttpMethod",
    "Locale",
    "SocketAddress",
]
