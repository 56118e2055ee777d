"""Security tokens – CredentialCache: reuse a cached token or fetch and persist a new one."""
from __future__ import annotations

import time

from kv_fetch.kernel.errors import SerializationError
from kv_fetch.kernel.time import Clock, SystemClock
from kv_fetch.observability.logging import get_logger
from kv_fetch.security.tokens.model import BearerCredential, CachedToken, ClientCredentials
from kv_fetch.security.tokens.ports import TokenCacheStore, TokenProvider

logger = get_logger(__name__)


class CredentialCache:
    """Produce a currently-valid :class:`BearerCredential` for a client identity.

    A cached token is reused while ``now < expires_on``. Otherwise exactly one
    token request is made and its result is written back to the store.
    Problems reading or writing the store are logged and never raised; only
    the identity provider's failure (:class:`AuthError`) propagates.
    """

    def __init__(self, store: TokenCacheStore, provider: TokenProvider, clock: Clock | None = None) -> None:
        self._store = store
        self._provider = provider
        self._clock = clock or SystemClock()

    async def acquire(self, credentials: ClientCredentials, resource: str) -> BearerCredential:
        started = time.perf_counter()
        cached = self._load(credentials.client_id, resource)
        if cached is not None:
            self._log_acquired("cache", started, cached)
            return BearerCredential(cached)

        token = await self._provider.request_token(credentials, resource)
        self._save(token)
        self._log_acquired("identity_provider", started, token)
        return BearerCredential(token)

    def _load(self, client_id: str, resource: str) -> CachedToken | None:
        try:
            raw = self._store.read(client_id)
        except (OSError, UnicodeError) as exc:
            logger.warning("token.cache_read_failed", client_id=client_id, error=str(exc))
            return None
        if raw is None:
            logger.info("token.cache_miss", client_id=client_id, reason="absent")
            return None

        try:
            token = CachedToken.from_json(raw)
        except SerializationError as exc:
            logger.warning("token.cache_corrupt", client_id=client_id, error=exc.message)
            return None

        if token.client_id and token.client_id != client_id:
            logger.info("token.cache_miss", client_id=client_id, reason="other_identity")
            return None
        if token.resource and token.resource != resource:
            logger.info("token.cache_miss", client_id=client_id, reason="other_resource")
            return None
        if token.is_expired(self._clock.now()):
            logger.info("token.cache_miss", client_id=client_id, reason="expired", expires_on=token.expires_on.isoformat())
            return None
        return token

    def _save(self, token: CachedToken) -> None:
        try:
            self._store.write(token.client_id, token.to_json())
        except OSError as exc:
            logger.warning("token.cache_write_failed", client_id=token.client_id, error=str(exc))
            return
        logger.info("token.cache_saved", client_id=token.client_id)

    @staticmethod
    def _log_acquired(source: str, started: float, token: CachedToken) -> None:
        logger.debug(
            "token.acquired",
            source=source,
            client_id=token.client_id,
            expires_on=token.expires_on.isoformat(),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )


__all__ = ["CredentialCache"]
