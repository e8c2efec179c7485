"""Testing utilities for code built on httpcontract.

Modules:
    fixtures: Pytest fixtures (recording_factory, isolated_registry).
    mocks: RecordingRequestFactory and CountingDiscoverer test doubles.

Example:
    >>> from httpcontract.testing import RecordingRequestFactory
"""

from httpcontract.testing.mocks import CountingDiscoverer, RecordingRequestFactory

__all__ = [
    "CountingDiscoverer",
    "RecordingRequestFactory",
]
