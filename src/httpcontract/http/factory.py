"""Request factory locator.

Outbound requests are built through whichever ``HttpRequestFactory`` the
process provides, so calling code never imports a concrete HTTP client.

A ``RequestFactoryRegistry`` resolves the factory lazily: an explicitly
registered factory wins, otherwise the registry's discover callable runs
(by default: the HTTPCONTRACT_REQUEST_FACTORY override, then the
``httpcontract.request_factories`` entry-point group). The first
successful resolution is cached for the lifetime of the registry. A
failed resolution is never cached, so later calls retry discovery.

Thread Safety:
    Resolution is guarded by a lock with a double-checked fast path.
    Callers racing on first use all observe the same factory instance,
    or each observe the same NoRequestFactoryError.

Example:
    >>> from httpcontract.http import factory
    >>> from httpcontract.transport.simple import SimpleHttpRequestFactory
    >>> factory.register_factory(SimpleHttpRequestFactory())
    >>> factory.post("/items", {"name": "widget"}).method
    <HttpMethod.POST: 'POST'>
"""

from __future__ import annotations

import importlib
import os
import threading
from importlib.metadata import entry_points
from typing import Any, Callable, Optional, Protocol, TypeVar, runtime_checkable

from httpcontract.errors import (
    InvalidArgumentError,
    InvalidRequestFactoryError,
    NoRequestFactoryError,
)
from httpcontract.http.request import MutableHttpRequest
from httpcontract.observability import get_logger

logger = get_logger(__name__)

ENTRY_POINT_GROUP = "httpcontract.request_factories"
ENV_REQUEST_FACTORY = "HTTPCONTRACT_REQUEST_FACTORY"

T = TypeVar("T")


@runtime_checkable
class HttpRequestFactory(Protocol):
    """Builds mutable outbound requests for a concrete HTTP client."""

    def get(self, uri: str) -> MutableHttpRequest[Any]: ...

    def post(self, uri: str, body: T) -> MutableHttpRequest[T]: ...


Discoverer = Callable[[], Optional[HttpRequestFactory]]


def _as_factory(target: str, obj: object) -> HttpRequestFactory:
    """Turn a loaded object into a factory instance.

    Classes and zero-argument callables are called; instances are used as is.
    """
    if isinstance(obj, type) or (callable(obj) and not isinstance(obj, HttpRequestFactory)):
        try:
            obj = obj()
        except TypeError as exc:
            raise InvalidRequestFactoryError(target, f"cannot be instantiated: {exc}") from exc
    if not isinstance(obj, HttpRequestFactory):
        raise InvalidRequestFactoryError(target, "does not provide get(uri) and post(uri, body)")
    return obj


def load_factory_reference(reference: str) -> HttpRequestFactory:
    """Load a factory from a ``package.module:attribute`` reference.

    Raises:
        InvalidRequestFactoryError: If the reference is malformed, cannot be
            imported, or does not resolve to a factory.
    """
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise InvalidRequestFactoryError(reference, "expected 'module:attribute'")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise InvalidRequestFactoryError(reference, f"cannot import {module_name}: {exc}") from exc
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise InvalidRequestFactoryError(
                reference, f"{module_name} has no attribute {attribute}"
            ) from None
    return _as_factory(reference, obj)


def discover_request_factory() -> HttpRequestFactory | None:
    """Find the process's request factory, or None when there is none.

    HTTPCONTRACT_REQUEST_FACTORY takes precedence over entry points. When
    several entry points are installed the first by name is used.
    """
    reference = os.environ.get(ENV_REQUEST_FACTORY, "").strip()
    if reference:
        return load_factory_reference(reference)

    candidates = sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name)
    if not candidates:
        return None
    selected = candidates[0]
    if len(candidates) > 1:
        logger.warning(
            "httpcontract.factory.multiple",
            candidates=[ep.name for ep in candidates],
            selected=selected.name,
        )
    try:
        loaded = selected.load()
    except Exception as exc:
        raise InvalidRequestFactoryError(selected.value, f"failed to load: {exc}") from exc
    return _as_factory(selected.value, loaded)


class RequestFactoryRegistry:
    """Holds the single authoritative request factory.

    Attributes:
        _factory: The resolved factory, None until first resolution
        _discover: Callable used when no factory was registered explicitly
        _lock: Guards discovery and registration

    Example:
        >>> registry = RequestFactoryRegistry(discover=None)
        >>> registry.get("/health")
        Traceback (most recent call last):
            ...
        httpcontract.errors.NoRequestFactoryError: No HTTP client implementation found
    """

    def __init__(self, discover: Discoverer | None = discover_request_factory) -> None:
        self._factory: HttpRequestFactory | None = None
        self._discover = discover
        self._lock = threading.Lock()

    @property
    def factory(self) -> HttpRequestFactory | None:
        """The cached factory, without triggering discovery."""
        return self._factory

    def register(self, factory: HttpRequestFactory) -> None:
        """Install ``factory`` as the authoritative one, replacing any other."""
        if isinstance(factory, type) or not isinstance(factory, HttpRequestFactory):
            raise TypeError("factory must be an instance providing get(uri) and post(uri, body)")
        with self._lock:
            is_override = self._factory is not None
            self._factory = factory
        logger.debug(
            "httpcontract.factory.registered",
            factory=type(factory).__name__,
            is_override=is_override,
        )

    def clear(self) -> None:
        """Forget the cached factory so the next call discovers again."""
        with self._lock:
            self._factory = None

    def resolve(self) -> HttpRequestFactory:
        """Return the factory, discovering it on first use.

        Raises:
            NoRequestFactoryError: If no factory is registered or discoverable.
            InvalidRequestFactoryError: If a configured factory cannot be loaded.
        """
        factory = self._factory
        if factory is not None:
            return factory
        with self._lock:
            if self._factory is None:
                discovered = self._discover() if self._discover is not None else None
                if discovered is None:
                    logger.warning(
                        "httpcontract.factory.missing",
                        entry_point_group=ENTRY_POINT_GROUP,
                        env=ENV_REQUEST_FACTORY,
                    )
                    raise NoRequestFactoryError(
                        details={"entry_point_group": ENTRY_POINT_GROUP, "env": ENV_REQUEST_FACTORY}
                    )
                self._factory = discovered
                logger.info("httpcontract.factory.resolved", factory=type(discovered).__name__)
            return self._factory

    def get(self, uri: str) -> MutableHttpRequest[Any]:
        """Build a GET request through the resolved factory."""
        return self.resolve().get(uri)

    def post(self, uri: str, body: T) -> MutableHttpRequest[T]:
        """Build a POST request through the resolved factory.

        Raises:
            InvalidArgumentError: If ``body`` is None (checked before resolution).
        """
        if body is None:
            raise InvalidArgumentError("body")
        return self.resolve().post(uri, body)


_registry: RequestFactoryRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> RequestFactoryRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = RequestFactoryRegistry()
        return _registry


def set_registry(registry: RequestFactoryRegistry | None) -> None:
    """Replace the process-wide registry. None restores lazy default creation."""
    global _registry
    with _registry_lock:
        _registry = registry


def reset_registry() -> None:
    """Drop the process-wide registry. Useful for testing."""
    set_registry(None)


def register_factory(factory: HttpRequestFactory) -> None:
    """Register ``factory`` with the process-wide registry."""
    get_registry().register(factory)


def get(uri: str) -> MutableHttpRequest[Any]:
    """Build a GET request for ``uri`` with the process's request factory.

    Raises:
        NoRequestFactoryError: If no HTTP client implementation is present.
    """
    return get_registry().get(uri)


def post(uri: str, body: T) -> MutableHttpRequest[T]:
    """Build a POST request for ``uri`` carrying ``body``.

    Raises:
        InvalidArgumentError: If ``body`` is None.
        NoRequestFactoryError: If no HTTP client implementation is present.
    """
    if body is None:
        raise InvalidArgumentError("body")
    return get_registry().post(uri, body)
