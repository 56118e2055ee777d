"""Unit tests for in-memory test fakes."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from kv_fetch.config.secrets import SecretRef
from kv_fetch.kernel.errors import AuthError, FetchError
from kv_fetch.security.tokens import CachedToken, ClientCredentials
from kv_fetch.testing.fakes import (
    FakeClock,
    FakeSecretStore,
    FrozenClock,
    InMemoryTokenCacheStore,
    StubTokenProvider,
)


class TestFakeClock:
    def test_pinned(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestInMemoryTokenCacheStore:
    def _token(self) -> CachedToken:
        return CachedToken(access_token="a", expires_on=FakeClock().now(), client_id="c1")

    def test_read_absent(self) -> None:
        assert InMemoryTokenCacheStore().read("c1") is None

    def test_seed_and_read_back(self) -> None:
        store = InMemoryTokenCacheStore().seed(self._token())
        assert store.token_for("c1") == self._token()

    def test_write_counts(self) -> None:
        store = InMemoryTokenCacheStore()
        store.write("c1", "x")
        store.write("c1", "y")
        assert store.writes == 2
        assert store.read("c1") == "y"

    def test_failure_switches(self) -> None:
        store = InMemoryTokenCacheStore()
        store.fail_reads = True
        store.fail_writes = True
        with pytest.raises(OSError):
            store.read("c1")
        with pytest.raises(OSError):
            store.write("c1", "x")


class TestStubTokenProvider:
    def test_issues_numbered_tokens(self) -> None:
        clock = FakeClock()
        provider = StubTokenProvider(clock, lifetime=timedelta(minutes=5))
        creds = ClientCredentials("c1", "s")
        first = asyncio.run(provider.request_token(creds, "r"))
        second = asyncio.run(provider.request_token(creds, "r"))
        assert (first.access_token, second.access_token) == ("token-1", "token-2")
        assert first.expires_on == clock.now() + timedelta(minutes=5)
        assert provider.calls == [("c1", "r"), ("c1", "r")]

    def test_error(self) -> None:
        provider = StubTokenProvider(FakeClock(), error=AuthError("denied"))
        with pytest.raises(AuthError):
            asyncio.run(provider.request_token(ClientCredentials("c1", "s"), "r"))
        assert provider.call_count == 1


class TestFakeSecretStore:
    def test_seed_and_get(self) -> None:
        store = FakeSecretStore().seed(SecretRef("Password", "v1"), "pw")
        assert asyncio.run(store.get(SecretRef("Password", "v1"))) == "pw"

    def test_unknown_ref_raises_fetch_error(self) -> None:
        store = FakeSecretStore().seed(SecretRef("Password"), "pw")
        with pytest.raises(FetchError) as exc_info:
            asyncio.run(store.get(SecretRef("Password", "v9")))
        assert exc_info.value.status_code == 404

    def test_records_requests(self) -> None:
        store = FakeSecretStore().seed(SecretRef("a"), "1")
        asyncio.run(store.get(SecretRef("a")))
        asyncio.run(store.get(SecretRef("a")))
        assert store.requested == [SecretRef("a"), SecretRef("a")]
