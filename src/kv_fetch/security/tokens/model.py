"""Security tokens – ClientCredentials, CachedToken, BearerCredential."""
from __future__ import annotations

import dataclasses
import json
from datetime import UTC, datetime
from typing import Any, Generator

import httpx

from kv_fetch.kernel.errors import SerializationError


@dataclasses.dataclass(frozen=True)
class ClientCredentials:
    """Service-principal identity used for the client-credentials grant."""
    client_id: str
    client_secret: str = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class CachedToken:
    """An access token issued to *client_id*, valid until *expires_on*."""
    access_token: str = dataclasses.field(repr=False)
    expires_on: datetime
    client_id: str
    refresh_token: str | None = dataclasses.field(default=None, repr=False)
    resource: str | None = None
    token_type: str = "Bearer"

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_on

    def to_json(self) -> str:
        payload: dict[str, Any] = {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_on": int(self.expires_on.timestamp()),
            "resource": self.resource,
            "token_type": self.token_type,
            "client_id": self.client_id,
        }
        return json.dumps(payload)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "CachedToken":
        """Parse a cache record.

        ``expires_on`` may be an integer or a numeric string (epoch seconds).

        Raises
        ------
        SerializationError
            The record is not a JSON object or lacks a usable field.
        """
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise SerializationError("Token cache record is not valid JSON", payload_type="CachedToken", cause=exc) from exc
        if not isinstance(data, dict):
            raise SerializationError("Token cache record is not a JSON object", payload_type="CachedToken")

        access_token = data.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise SerializationError("Token cache record has no access_token", payload_type="CachedToken")
        try:
            expires_on = datetime.fromtimestamp(int(data["expires_on"]), tz=UTC)
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise SerializationError(
                "Token cache record has no usable expires_on", payload_type="CachedToken", cause=exc
            ) from exc

        return cls(
            access_token=access_token,
            expires_on=expires_on,
            client_id=str(data.get("client_id") or ""),
            refresh_token=data.get("refresh_token") or None,
            resource=data.get("resource") or None,
            token_type=data.get("token_type") or "Bearer",
        )


class BearerCredential(httpx.Auth):
    """httpx auth flow that sends the cached access token on every request."""

    def __init__(self, token: CachedToken) -> None:
        self._token = token

    @property
    def expires_on(self) -> datetime:
        return self._token.expires_on

    @property
    def authorization(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"{self._token.token_type} {self._token.access_token}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self.authorization
        yield request

    def __repr__(self) -> str:
        return f"BearerCredential(expires_on={self.expires_on.isoformat()!r})"


__all__ = ["BearerCredential", "CachedToken", "ClientCredentials"]
