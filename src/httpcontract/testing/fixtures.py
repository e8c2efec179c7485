"""Pytest fixtures for httpcontract tests.

Fixtures (load with ``pytest_plugins = ["httpcontract.testing.fixtures"]``):
    recording_factory: A fresh RecordingRequestFactory.
    isolated_registry: A process-wide registry with discovery disabled,
        restored after the test.
"""

from collections.abc import Iterator

import pytest

from httpcontract.http import factory as factory_module
from httpcontract.http.factory import RequestFactoryRegistry
from httpcontract.testing.mocks import RecordingRequestFactory


@pytest.fixture
def recording_factory() -> RecordingRequestFactory:
    """Create a RecordingRequestFactory with no recorded calls."""
    return RecordingRequestFactory()


@pytest.fixture
def isolated_registry() -> Iterator[RequestFactoryRegistry]:
    """Install an empty, non-discovering registry as the process-wide one.

    Installed entry points and HTTPCONTRACT_REQUEST_FACTORY are ignored, so
    tests decide exactly which factory (if any) is present.

    Yields:
        The installed RequestFactoryRegistry.
    """
    registry = RequestFactoryRegistry(discover=None)
    factory_module.set_registry(registry)
    try:
        yield registry
    finally:
        factory_module.reset_registry()


__all__ = [
    "isolated_registry",
    "recording_factory",
]
