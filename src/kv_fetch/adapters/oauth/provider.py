"""OAuth adapter – ClientCredentialsTokenProvider."""
from __future__ import annotations

import json
from datetime import datetime, timedelta, UTC
from typing import Any

from kv_fetch.adapters.http import HttpxHttpClient
from kv_fetch.kernel.errors import AuthError, InfrastructureError
from kv_fetch.kernel.time import Clock, SystemClock
from kv_fetch.observability.logging import get_logger
from kv_fetch.security.tokens import CachedToken, ClientCredentials, TokenProvider

logger = get_logger(__name__)

DEFAULT_EXPIRES_IN = 3600


class ClientCredentialsTokenProvider(TokenProvider):
    """Requests tokens with the OAuth2 client-credentials grant.

    Targets the Azure AD v1 endpoint shape, i.e.
    ``https://login.microsoftonline.com/<tenant>/oauth2/token`` with a
    ``resource`` form field naming the audience.

    Parameters
    ----------
    token_endpoint:
        Full URL of the token endpoint.
    clock:
        Used to turn a relative ``expires_in`` into an absolute expiry.
    """

    def __init__(self, token_endpoint: str, clock: Clock | None = None, **client_kwargs: Any) -> None:
        self._endpoint = token_endpoint
        self._clock = clock or SystemClock()
        self._client_kwargs = client_kwargs

    async def request_token(self, credentials: ClientCredentials, resource: str) -> CachedToken:
        form = {
            "grant_type": "client_credentials",
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "resource": resource,
        }
        logger.info("token.request", endpoint=self._endpoint, client_id=credentials.client_id, resource=resource)
        try:
            async with HttpxHttpClient(**self._client_kwargs) as client:
                response = await client.post(self._endpoint, data=form, headers={"Accept": "application/json"})
        except InfrastructureError as exc:
            raise AuthError(
                f"Token request to {self._endpoint} failed: {_describe(exc)}",
                detail={"endpoint": self._endpoint, "client_id": credentials.client_id},
                cause=exc,
            ) from exc

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise AuthError(
                f"Token endpoint {self._endpoint} returned a non-JSON body",
                detail={"endpoint": self._endpoint},
                cause=exc,
            ) from exc
        return self._to_token(body, credentials.client_id, resource)

    def _to_token(self, body: Any, client_id: str, resource: str) -> CachedToken:
        if not isinstance(body, dict) or not body.get("access_token"):
            raise AuthError(
                f"Token endpoint {self._endpoint} did not return an access_token",
                detail={"endpoint": self._endpoint},
            )
        return CachedToken(
            access_token=str(body["access_token"]),
            expires_on=self._expiry(body),
            client_id=client_id,
            refresh_token=body.get("refresh_token") or None,
            resource=body.get("resource") or resource,
            token_type=body.get("token_type") or "Bearer",
        )

    def _expiry(self, body: dict[str, Any]) -> datetime:
        # Azure AD v1 sends both values as strings
        expires_on = body.get("expires_on")
        if expires_on not in (None, ""):
            try:
                return datetime.fromtimestamp(int(expires_on), tz=UTC)
            except (TypeError, ValueError, OverflowError):
                logger.debug("token.expires_on_unparsable", value=str(expires_on))
        try:
            expires_in = int(body.get("expires_in") or DEFAULT_EXPIRES_IN)
        except (TypeError, ValueError):
            expires_in = DEFAULT_EXPIRES_IN
        return self._clock.now() + timedelta(seconds=expires_in)


def _describe(exc: InfrastructureError) -> str:
    """Prefer the identity provider's own error_description when it sent one."""
    body = exc.detail.get("body")
    if body:
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None
        if isinstance(payload, dict) and payload.get("error_description"):
            return f"{exc.message}: {payload['error_description']}"
    return exc.message


__all__ = ["ClientCredentialsTokenProvider", "DEFAULT_EXPIRES_IN"]
