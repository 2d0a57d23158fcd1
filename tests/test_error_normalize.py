"""Tests for transport exception classification."""

from __future__ import annotations

import asyncio
import concurrent.futures
import socket

import httpx

from netresult import codes
from netresult.calls import safe_api_call
from netresult.codes import SentinelCodes
from netresult.errors import exception_to_code, is_cancellation, is_host_unreachable
from netresult.http import HttpRequestError
from netresult.result import Error


def test_direct_unreachable_exceptions() -> None:
    """DNS, connect, and refused failures should classify as unreachable."""
    request = httpx.Request("GET", "https://example.test")

    assert is_host_unreachable(socket.gaierror(socket.EAI_NONAME, "unknown host"))
    assert is_host_unreachable(httpx.ConnectError("refused", request=request))
    assert is_host_unreachable(ConnectionRefusedError())


def test_unreachable_found_through_explicit_cause() -> None:
    """Wrapped errors should classify through their cause chain."""
    wrapped = HttpRequestError(
        message="HTTP request failed",
        method="GET",
        url="https://example.test",
        cause=OSError("wrapper"),
    )
    try:
        try:
            raise socket.gaierror(socket.EAI_NONAME, "unknown host")
        except socket.gaierror as exc:
            raise wrapped from exc
    except HttpRequestError as exc:
        assert is_host_unreachable(exc)


def test_other_failures_are_not_unreachable() -> None:
    """Timeouts and generic errors should not classify as unreachable."""
    request = httpx.Request("GET", "https://example.test")

    assert not is_host_unreachable(httpx.ReadTimeout("slow", request=request))
    assert not is_host_unreachable(ValueError("bad"))


def test_exception_to_code_uses_sentinels() -> None:
    """exception_to_code should pick the matching sentinel."""
    custom = SentinelCodes(network_error=1, unknown_error=2)

    assert exception_to_code(ConnectionRefusedError()) == codes.NETWORK_ERROR
    assert exception_to_code(RuntimeError()) == codes.UNKNOWN_ERROR
    assert exception_to_code(ConnectionRefusedError(), sentinels=custom) == 1
    assert exception_to_code(RuntimeError(), sentinels=custom) == 2


def test_is_cancellation() -> None:
    """Both asyncio and futures cancellation should be recognized."""
    assert is_cancellation(asyncio.CancelledError())
    assert is_cancellation(concurrent.futures.CancelledError())
    assert not is_cancellation(TimeoutError())


def test_implicit_context_does_not_make_failure_unreachable() -> None:
    """An error raised while handling a connect failure keeps its own class."""
    try:
        try:
            raise ConnectionRefusedError()
        except ConnectionRefusedError:
            raise ValueError("fallback response was malformed")
    except ValueError as exc:
        assert isinstance(exc.__context__, ConnectionRefusedError)
        assert not is_host_unreachable(exc)
        assert exception_to_code(exc) == codes.UNKNOWN_ERROR


def test_safe_api_call_ignores_implicit_connect_context() -> None:
    """A later timeout after an earlier connect error maps to unknown error."""
    request = httpx.Request("GET", "https://example.test")

    def call() -> object:
        try:
            raise httpx.ConnectError("first attempt refused", request=request)
        except httpx.ConnectError:
            raise httpx.ReadTimeout("second attempt timed out", request=request)

    assert safe_api_call(call) == Error(code=codes.UNKNOWN_ERROR)  # type: ignore[arg-type]
