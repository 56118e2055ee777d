"""Unit tests – HTTP adapter."""
from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from kv_fetch.adapters.http import HttpxHttpClient
from kv_fetch.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError


def _get(url: str) -> httpx.Response:
    async def run() -> httpx.Response:
        async with HttpxHttpClient() as client:
            return await client.get(url)

    return asyncio.run(run())


class TestHttpxHttpClient:
    @respx.mock
    def test_returns_response_on_success(self) -> None:
        respx.get("http://svc/ok").mock(return_value=httpx.Response(200, json={"ok": True}))
        assert _get("http://svc/ok").json() == {"ok": True}

    @respx.mock
    def test_post_sends_form(self) -> None:
        route = respx.post("http://svc/form").mock(return_value=httpx.Response(200))

        async def run() -> None:
            async with HttpxHttpClient() as client:
                await client.post("http://svc/form", data={"a": "1"})

        asyncio.run(run())
        assert route.calls.last.request.content == b"a=1"

    @respx.mock
    def test_status_error_maps_to_external_service_error(self) -> None:
        respx.get("http://svc/missing").mock(return_value=httpx.Response(404, text="nope"))
        with pytest.raises(ExternalServiceError) as exc_info:
            _get("http://svc/missing")
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail["body"] == "nope"
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @respx.mock
    def test_timeout_maps_to_timeout_error(self) -> None:
        respx.get("http://svc/slow").mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(AppTimeoutError):
            _get("http://svc/slow")

    @respx.mock
    def test_transport_error_maps_to_external_service_error(self) -> None:
        respx.get("http://svc/down").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(ExternalServiceError) as exc_info:
            _get("http://svc/down")
        assert exc_info.value.status_code is None
        assert "refused" in exc_info.value.message

    @respx.mock
    def test_auth_is_applied(self) -> None:
        route = respx.get("http://svc/ok").mock(return_value=httpx.Response(200))

        async def run() -> None:
            async with HttpxHttpClient(auth=httpx.BasicAuth("u", "p")) as client:
                await client.get("http://svc/ok")

        asyncio.run(run())
        assert route.calls.last.request.headers["Authorization"].startswith("Basic ")

    def test_invalid_url_maps_to_external_service_error(self) -> None:
        with pytest.raises(ExternalServiceError) as exc_info:
            _get("https://svc:notaport/ok")
        assert exc_info.value.service == "https://svc:notaport/ok"
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
