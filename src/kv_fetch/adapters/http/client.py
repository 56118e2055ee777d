"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from kv_fetch.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    No timeout is set here; httpx's default applies unless the caller
    passes one.
    """

    def __init__(self, base_url: str = "", **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=url,
                message=f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                detail={"body": exc.response.text[:500]},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc) or type(exc).__name__, cause=exc) from exc
        except httpx.InvalidURL as exc:
            # not an HTTPError subclass
            raise ExternalServiceError(service=url, message=f"Invalid URL {url}: {exc}", cause=exc) from exc


__all__ = ["HttpxHttpClient"]
