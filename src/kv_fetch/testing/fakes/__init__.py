"""Testing fakes – in-memory doubles for the clock, token cache and secret store."""
from kv_fetch.testing.fakes.clock import FakeClock
from kv_fetch.testing.fakes.secrets import FakeSecretStore
from kv_fetch.testing.fakes.token_cache import InMemoryTokenCacheStore
from kv_fetch.testing.fakes.token_provider import StubTokenProvider
from kv_fetch.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FakeSecretStore",
    "FrozenClock",
    "InMemoryTokenCacheStore",
    "StubTokenProvider",
]
