"""Key Vault adapter – KeyVaultSecretStore."""
from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx

from kv_fetch.adapters.http import HttpxHttpClient
from kv_fetch.config.secrets import SecretRef, SecretStore
from kv_fetch.kernel.errors import ExternalServiceError, FetchError, InfrastructureError
from kv_fetch.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_VERSION = "2016-10-01"


class KeyVaultSecretStore(SecretStore):
    """Reads secret values from the Key Vault REST API.

    ``GET {base_url}/secrets/{name}[/{version}]?api-version=...``; an empty
    version asks the vault for the current one. Each lookup is a single
    request with no retry.
    """

    def __init__(
        self,
        base_url: str,
        credential: httpx.Auth,
        api_version: str = DEFAULT_API_VERSION,
        **client_kwargs: Any,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._credential = credential
        self._api_version = api_version
        self._client_kwargs = client_kwargs

    def secret_url(self, name: str, version: str = "") -> str:
        url = f"{self._base_url}/secrets/{quote(name, safe='')}"
        if version:
            url += f"/{quote(version, safe='')}"
        return url

    async def get(self, ref: SecretRef) -> str:
        return await self.get_secret(ref.name, ref.version)

    async def get_secret(self, name: str, version: str = "") -> str:
        """Return the value of secret *name* at *version* (current when empty).

        Raises
        ------
        FetchError
            Transport failure, non-2xx status, or a body without ``value``.
        """
        url = self.secret_url(name, version)
        try:
            async with HttpxHttpClient(auth=self._credential, **self._client_kwargs) as client:
                response = await client.get(url, params={"api-version": self._api_version})
        except InfrastructureError as exc:
            status = exc.status_code if isinstance(exc, ExternalServiceError) else None
            raise FetchError(
                name,
                version,
                f"Fetching secret '{name}' failed: {exc.message}",
                service=url,
                status_code=status,
                cause=exc,
            ) from exc

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FetchError(name, version, f"Secret '{name}' response is not JSON", service=url, cause=exc) from exc

        value = body.get("value") if isinstance(body, dict) else None
        if not isinstance(value, str):
            raise FetchError(name, version, f"Secret '{name}' response has no value", service=url)

        logger.debug("secret.fetched", secret_name=name, version=version or "current")
        return value


__all__ = ["DEFAULT_API_VERSION", "KeyVaultSecretStore"]
