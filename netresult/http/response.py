"""Response abstraction consumed by ``safe_api_call``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from netresult import codes

from .errors import HttpJsonDecodeError


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ApiResponse(Generic[T]):
    """One completed HTTP exchange.

    ``body`` holds the decoded payload of a successful response and is
    ``None`` when the body was empty. ``error_body`` holds the raw text of a
    failed response so error parsers can interpret it.
    """

    status_code: int
    body: T | None = None
    error_body: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_successful(self) -> bool:
        """Return True for 2xx status codes."""
        return codes.is_successful(self.status_code)

    @classmethod
    def from_httpx(
        cls,
        response: httpx.Response,
        *,
        model: type[T] | None = None,
    ) -> ApiResponse[T]:
        """Adapt an ``httpx.Response``, decoding successful bodies.

        Raises ``HttpJsonDecodeError`` when a successful body is not valid
        JSON or does not validate against ``model``.
        """
        headers = dict(response.headers.items())
        if not response.is_success:
            return cls(
                status_code=response.status_code,
                error_body=_response_text(response) or None,
                headers=headers,
            )

        if response.status_code == codes.SUCCESS_NO_CONTENT or not response.content:
            return cls(status_code=response.status_code, headers=headers)

        return cls(
            status_code=response.status_code,
            body=_decode_body(response, model),
            headers=headers,
        )


def _decode_body(response: httpx.Response, model: type[Any] | None) -> Any:
    """Decode JSON from a successful response, optionally validating it."""
    try:
        if model is None:
            return response.json()
        return TypeAdapter(model).validate_json(response.content)
    except (ValueError, ValidationError) as exc:
        method, url = _request_line(response)
        raise HttpJsonDecodeError(
            message=f"Invalid JSON response for {method} {url}",
            method=method,
            url=url,
            retryable=False,
            status_code=response.status_code,
            response_body=_response_text(response),
            cause=exc,
        ) from exc


def _request_line(response: httpx.Response) -> tuple[str, str]:
    """Return method and URL of the originating request when one is attached."""
    try:
        request = response.request
    except RuntimeError:
        return "", ""
    return request.method, str(request.url)


def _response_text(response: httpx.Response) -> str:
    """Return response text without raising secondary decode errors."""
    try:
        return response.text
    except Exception:
        return ""
