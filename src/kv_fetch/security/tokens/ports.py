"""Security tokens – TokenCacheStore and TokenProvider ports."""
from __future__ import annotations

import abc

from kv_fetch.security.tokens.model import CachedToken, ClientCredentials


class TokenCacheStore(abc.ABC):
    """Port: persist one serialized token record per client identity."""

    @abc.abstractmethod
    def read(self, client_id: str) -> str | None:
        """Return the stored record, or ``None`` when nothing is stored.

        Any other failure raises :class:`OSError`.
        """

    @abc.abstractmethod
    def write(self, client_id: str, payload: str) -> None:
        """Replace the stored record. Failures raise :class:`OSError`."""


class TokenProvider(abc.ABC):
    """Port: obtain a fresh token from an identity provider."""

    @abc.abstractmethod
    async def request_token(self, credentials: ClientCredentials, resource: str) -> CachedToken:
        """Raises :class:`~kv_fetch.kernel.errors.AuthError` on any failure."""


__all__ = ["TokenCacheStore", "TokenProvider"]
