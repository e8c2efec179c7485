"""Header names and the header accessor capability.

``HttpHeaders`` is the read-only accessor every request exposes.
``Headers`` is the in-memory implementation used by the simple request
variants; transport adapters wrap their own header storage instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol, Union, runtime_checkable

ACCEPT = "Accept"
ACCEPT_CHARSET = "Accept-Charset"
ACCEPT_ENCODING = "Accept-Encoding"
ACCEPT_LANGUAGE = "Accept-Language"
AUTHORIZATION = "Authorization"
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LANGUAGE = "Content-Language"
CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE = "Content-Type"
COOKIE = "Cookie"
HOST = "Host"
USER_AGENT = "User-Agent"

HeaderSource = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


@runtime_checkable
class HttpHeaders(Protocol):
    """Case-insensitive, read-only header lookup."""

    def find_first(self, name: str) -> str | None:
        """Return the first value for ``name``, or None when absent."""
        ...

    def get_all(self, name: str) -> list[str]: ...

    def names(self) -> list[str]: ...


class Headers:
    """Case-insensitive multi-valued header store.

    Insertion order is preserved, both across names and across repeated
    values of one name. The first spelling seen for a name is the one
    reported by ``names()``.

    Example:
        >>> headers = Headers({"Accept-Language": "fr"})
        >>> headers.find_first("accept-language")
        'fr'
        >>> headers.add("Accept-Language", "de")
        >>> headers.get_all("ACCEPT-LANGUAGE")
        ['fr', 'de']
    """

    def __init__(self, source: HeaderSource = None) -> None:
        self._values: dict[str, list[str]] = {}
        self._names: dict[str, str] = {}
        if source is None:
            return
        items = source.items() if isinstance(source, Mapping) else source
        for name, value in items:
            self.add(name, value)

    def find_first(self, name: str) -> str | None:
        values = self._values.get(name.lower())
        return values[0] if values else None

    def get_all(self, name: str) -> list[str]:
        return list(self._values.get(name.lower(), ()))

    def names(self) -> list[str]:
        return list(self._names.values())

    def add(self, name: str, value: str) -> None:
        key = name.lower()
        self._names.setdefault(key, name)
        self._values.setdefault(key, []).append(str(value))

    def set(self, name: str, value: str) -> None:
        """Replace every value of ``name`` with a single value."""
        self.remove(name)
        self.add(name, value)

    def remove(self, name: str) -> None:
        key = name.lower()
        self._values.pop(key, None)
        self._names.pop(key, None)

    def copy(self) -> Headers:
        return Headers(self.items())

    def items(self) -> list[tuple[str, str]]:
        """Flatten to ``(name, value)`` pairs in insertion order."""
        return [
            (self._names[key], value) for key, values in self._values.items() for value in values
        ]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Headers({self.items()!r})"


class HeadersView:
    """Read-only view over a ``Headers`` map, for requests that must not change.

    Example:
        >>> view = HeadersView(Headers({"Accept": "text/html"}))
        >>> view.find_first("accept"), hasattr(view, "set")
        ('text/html', False)
    """

    __slots__ = ("_headers",)

    def __init__(self, headers: Headers) -> None:
        self._headers = headers

    def find_first(self, name: str) -> str | None:
        return self._headers.find_first(name)

    def get_all(self, name: str) -> list[str]:
        return self._headers.get_all(name)

    def names(self) -> list[str]:
        return self._headers.names()

    def items(self) -> list[tuple[str, str]]:
        return self._headers.items()

    def __contains__(self, name: object) -> bool:
        return name in self._headers

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeadersView):
            return self._headers == other._headers
        if isinstance(other, Headers):
            return self._headers == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"HeadersView({self._headers.items()!r})"
