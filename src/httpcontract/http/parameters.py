"""Query-parameter capability and the store parsed from a URI query string."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable
from urllib.parse import parse_qsl, urlencode, urlsplit


@runtime_checkable
class HttpParameters(Protocol):
    """Read-only multi-valued lookup of query parameters."""

    def find_first(self, name: str) -> str | None: ...

    def get_all(self, name: str) -> list[str]: ...

    def names(self) -> list[str]: ...


class QueryParameters:
    """Query parameters in the order they appeared. Names are case-sensitive.

    Example:
        >>> params = QueryParameters.from_uri("/search?q=a&tag=x&tag=y")
        >>> params.find_first("q"), params.get_all("tag")
        ('a', ['x', 'y'])
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        self._values: dict[str, list[str]] = {}
        for name, value in pairs:
            self._values.setdefault(name, []).append(value)

    @classmethod
    def from_query(cls, query: str) -> QueryParameters:
        return cls(parse_qsl(query, keep_blank_values=True))

    @classmethod
    def from_uri(cls, uri: str) -> QueryParameters:
        """Parse the query of ``uri``. A malformed authority does not prevent it."""
        try:
            query = urlsplit(uri).query
        except ValueError:
            query = uri.partition("#")[0].partition("?")[2]
        return cls.from_query(query)

    def find_first(self, name: str) -> str | None:
        values = self._values.get(name)
        return values[0] if values else None

    def get_all(self, name: str) -> list[str]:
        return list(self._values.get(name, ()))

    def names(self) -> list[str]:
        return list(self._values)

    def items(self) -> list[tuple[str, str]]:
        return [(name, value) for name, values in self._values.items() for value in values]

    def to_query(self) -> str:
        return urlencode(self.items())

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
