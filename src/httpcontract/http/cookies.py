"""Cookie capability and the store parsed from ``Cookie`` headers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from httpcontract.models.entities import Cookie


@runtime_checkable
class Cookies(Protocol):
    """Read-only lookup of request cookies by name."""

    def find(self, name: str) -> Cookie | None: ...

    def get_all(self) -> list[Cookie]: ...

    def names(self) -> list[str]: ...


def parse_cookie_header(value: str) -> list[Cookie]:
    """Split a ``Cookie`` header into cookies.

    Pairs without a name are skipped. A pair without ``=`` is a cookie with
    an empty value. Surrounding double quotes on values are removed.

    Example:
        >>> [c.name for c in parse_cookie_header("a=1; b=\\"2\\"; ;c")]
        ['a', 'b', 'c']
    """
    cookies: list[Cookie] = []
    for chunk in value.split(";"):
        name, sep, raw = chunk.partition("=")
        name = name.strip()
        if not name:
            continue
        raw = raw.strip() if sep else ""
        if len(raw) >= 2 and raw[0] == raw[-1] == '"':
            raw = raw[1:-1]
        cookies.append(Cookie(name=name, value=raw))
    return cookies


class RequestCookies:
    """Cookies sent by a client. The first occurrence of a name wins.

    Example:
        >>> cookies = RequestCookies.from_headers(["session=abc; theme=dark"])
        >>> cookies.find("theme").value
        'dark'
    """

    def __init__(self, cookies: Iterable[Cookie] = ()) -> None:
        self._cookies: dict[str, Cookie] = {}
        for cookie in cookies:
            self._cookies.setdefault(cookie.name, cookie)

    @classmethod
    def from_headers(cls, header_values: Iterable[str]) -> RequestCookies:
        parsed: list[Cookie] = []
        for value in header_values:
            parsed.extend(parse_cookie_header(value))
        return cls(parsed)

    def find(self, name: str) -> Cookie | None:
        return self._cookies.get(name)

    def get_all(self) -> list[Cookie]:
        return list(self._cookies.values())

    def names(self) -> list[str]:
        return list(self._cookies)

    def with_cookie(self, cookie: Cookie) -> RequestCookies:
        """Return a copy where ``cookie`` replaces any cookie of the same name."""
        merged = dict(self._cookies)
        merged[cookie.name] = cookie
        return RequestCookies(merged.values())

    def to_header(self) -> str | None:
        """Render as a single ``Cookie`` header value, or None when empty."""
        if not self._cookies:
            return None
        return "; ".join(f"{c.name}={c.value}" for c in self._cookies.values())

    def __contains__(self, name: object) -> bool:
        return name in self._cookies

    def __iter__(self) -> Iterator[Cookie]:
        return iter(self._cookies.values())

    def __len__(self) -> int:
        return len(self._cookies)
