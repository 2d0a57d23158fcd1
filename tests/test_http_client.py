"""Unit tests for the httpx client wrappers."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from netresult.config import HttpSettings
from netresult.http import AsyncHttpClient, HttpClient, HttpRequestError
from netresult.logging import log_context


def test_http_client_returns_failed_responses_without_raising() -> None:
    """HttpClient should return non-2xx responses for later classification."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable", request=request)

    client = HttpClient(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )
    try:
        response = client.get("/health")
    finally:
        client.close()

    assert response.status_code == 503
    assert response.is_successful is False
    assert response.error_body == "unavailable"


def test_http_client_maps_transport_failure_to_typed_error() -> None:
    """HttpClient should raise HttpRequestError on transport failures."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection failed", request=request)

    client = HttpClient(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )
    try:
        with pytest.raises(HttpRequestError) as exc_info:
            client.get("/health")
    finally:
        client.close()

    error = exc_info.value
    assert error.method == "GET"
    assert error.url == "https://example.test/health"
    assert error.retryable is True
    assert isinstance(error.cause, httpx.ConnectError)
    assert error.__cause__ is error.cause


def test_http_client_from_settings_applies_base_url_and_headers() -> None:
    """from_settings should configure base URL and default headers."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[1, 2], request=request)

    settings = HttpSettings(
        base_url="https://api.example.test",
        headers={"Accept-Language": "en"},
    )
    with HttpClient.from_settings(
        settings, transport=httpx.MockTransport(handler)
    ) as client:
        response = client.get("/items")

    assert response.body == [1, 2]
    assert str(seen[0].url) == "https://api.example.test/items"
    assert seen[0].headers["accept-language"] == "en"


def test_http_client_does_not_close_injected_client() -> None:
    """Clients passed in by the caller should stay open after close."""
    injected = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(204))
    )
    wrapper = HttpClient(client=injected)
    wrapper.close()

    assert injected.is_closed is False
    injected.close()


def test_async_http_client_post_returns_decoded_payload() -> None:
    """AsyncHttpClient.post should decode and return JSON content."""

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        return httpx.Response(201, json={"created": True}, request=request)

    client = AsyncHttpClient(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    )

    async def _run() -> None:
        try:
            response = await client.post("/items", json={"name": "demo"})
            assert response.status_code == 201
            assert response.body == {"created": True}
        finally:
            await client.aclose()

    asyncio.run(_run())


def test_transport_error_propagates_through_log_context() -> None:
    """HttpRequestError should survive context managers that set its traceback."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection failed", request=request)

    with HttpClient(
        base_url="https://example.test",
        transport=httpx.MockTransport(handler),
    ) as client:
        with pytest.raises(HttpRequestError) as exc_info:
            with log_context({"operation": "profile.get"}):
                client.get("/profile")

    assert exc_info.value.__traceback__ is not None
    assert isinstance(exc_info.value.cause, httpx.ConnectError)
