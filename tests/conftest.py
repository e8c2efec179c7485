"""Shared pytest fixtures for httpcontract tests.

This module provides common fixtures used across test modules and makes
sure no test sees the factory installed through entry points or the
HTTPCONTRACT_* environment of the machine running the suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

import pytest

from httpcontract.http import factory as factory_module
from httpcontract.transport.simple import SimpleHttpRequest

# Load httpcontract.testing fixtures (recording_factory, isolated_registry)
pytest_plugins = ["httpcontract.testing.fixtures"]

DEFAULT_TEST_LOCALE = "en-GB"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the default locale and drop any factory override or cached registry."""
    monkeypatch.setenv("HTTPCONTRACT_DEFAULT_LOCALE", DEFAULT_TEST_LOCALE)
    monkeypatch.delenv("HTTPCONTRACT_REQUEST_FACTORY", raising=False)
    factory_module.reset_registry()
    yield
    factory_module.reset_registry()


@pytest.fixture
def make_request() -> Callable[..., SimpleHttpRequest[Any]]:
    """Build a GET request for ``/`` with the given headers."""

    def _make(headers: Mapping[str, str] | None = None, **kwargs: Any) -> SimpleHttpRequest[Any]:
        uri = kwargs.pop("uri", "/")
        return SimpleHttpRequest.of("GET", uri, headers=headers, **kwargs)

    return _make
