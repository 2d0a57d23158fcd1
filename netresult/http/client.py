"""Thin httpx wrappers that return ``ApiResponse`` for every status code.

Status classification is left to ``safe_api_call``; these clients only map
transport failures to ``HttpRequestError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from .errors import HttpRequestError
from .response import ApiResponse

if TYPE_CHECKING:
    from netresult.config import HttpSettings


T = TypeVar("T")


def _request_error(exc: httpx.RequestError, method: str, url: str) -> HttpRequestError:
    """Build a typed transport error from one httpx request failure."""
    try:
        request = exc.request
    except RuntimeError:
        request = None
    request_url = str(request.url) if request is not None else url
    request_method = request.method if request is not None else method.upper()
    return HttpRequestError(
        message=f"HTTP request failed for {request_method} {request_url}",
        method=request_method,
        url=request_url,
        retryable=True,
        cause=exc,
    )


class HttpClient:
    """Thin synchronous wrapper over ``httpx.Client``."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = False,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a new HTTP client wrapper."""
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            follow_redirects=follow_redirects,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: HttpSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> HttpClient:
        """Create a client from resolved ``HttpSettings``."""
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            headers=settings.headers,
            follow_redirects=settings.follow_redirects,
            transport=transport,
        )

    def close(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close client."""
        self.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        model: type[T] | None = None,
        **kwargs: Any,
    ) -> ApiResponse[T]:
        """Issue one request and adapt the response."""
        try:
            response = self._client.request(method=method, url=url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method, url) from exc
        return ApiResponse.from_httpx(response, model=model)

    def get(self, url: str, **kwargs: Any) -> ApiResponse[Any]:
        """Issue one GET request."""
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> ApiResponse[Any]:
        """Issue one POST request."""
        return self.request("POST", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> ApiResponse[Any]:
        """Issue one DELETE request."""
        return self.request("DELETE", url, **kwargs)


class AsyncHttpClient:
    """Thin asynchronous wrapper over ``httpx.AsyncClient``."""

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a new asynchronous HTTP client wrapper."""
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers=dict(headers or {}),
            follow_redirects=follow_redirects,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: HttpSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AsyncHttpClient:
        """Create a client from resolved ``HttpSettings``."""
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            headers=settings.headers,
            follow_redirects=settings.follow_redirects,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close client."""
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        model: type[T] | None = None,
        **kwargs: Any,
    ) -> ApiResponse[T]:
        """Issue one request and adapt the response."""
        try:
            response = await self._client.request(method=method, url=url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method, url) from exc
        return ApiResponse.from_httpx(response, model=model)

    async def get(self, url: str, **kwargs: Any) -> ApiResponse[Any]:
        """Issue one GET request."""
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> ApiResponse[Any]:
        """Issue one POST request."""
        return await self.request("POST", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> ApiResponse[Any]:
        """Issue one DELETE request."""
        return await self.request("DELETE", url, **kwargs)
