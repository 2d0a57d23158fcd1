"""Typed errors raised by the HTTP call helpers.

The dataclasses are not frozen: the interpreter and ``contextlib`` assign
``__traceback__`` while these errors propagate.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class HttpError(Exception):
    """Base error type for HTTP helper failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(eq=False)
class HttpClientError(HttpError):
    """Base error for outbound call failures."""

    method: str
    url: str
    retryable: bool = False


@dataclass(eq=False)
class HttpRequestError(HttpClientError):
    """Transport-level failure before any response was received."""

    cause: Exception | None = None


@dataclass(eq=False)
class HttpJsonDecodeError(HttpClientError):
    """Successful response whose body could not be decoded."""

    status_code: int = 0
    response_body: str = ""
    cause: Exception | None = None
