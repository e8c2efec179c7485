"""Small value entities shared by request implementations."""

from __future__ import annotations

from pydantic import Field

from httpcontract.models.base import HttpContractBaseModel


class SocketAddress(HttpContractBaseModel):
    """A host/port pair for the remote or server end of a connection.

    Example:
        >>> str(SocketAddress(host="127.0.0.1", port=8080))
        '127.0.0.1:8080'
    """

    host: str
    port: int = Field(ge=0, le=65535)

    @classmethod
    def from_tuple(cls, value: tuple[str, int | None] | None) -> SocketAddress | None:
        """Build an address from an ASGI-style ``(host, port)`` tuple.

        Unix-socket servers report ``(path, None)``, which has no address.
        """
        if value is None or value[1] is None:
            return None
        host, port = value
        return cls(host=host, port=port)

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


class Cookie(HttpContractBaseModel):
    """A single request cookie."""

    name: str = Field(min_length=1)
    value: str = ""
