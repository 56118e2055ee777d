"""Testing support – in-memory fakes for kv_fetch ports.

Usage::

    from kv_fetch.testing.fakes import FakeClock, InMemoryTokenCacheStore, StubTokenProvider
"""

from kv_fetch.testing.fakes import (
    FakeClock,
    FakeSecretStore,
    InMemoryTokenCacheStore,
    StubTokenProvider,
)

__all__ = [
    "FakeClock",
    "FakeSecretStore",
    "InMemoryTokenCacheStore",
    "StubTokenProvider",
]
