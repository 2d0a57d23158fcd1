"""Exception classification for calls that never produced a response."""

from __future__ import annotations

import asyncio
import concurrent.futures
import socket
from collections.abc import Iterator

import httpx

from netresult.codes import DEFAULT_SENTINELS, SentinelCodes

_UNREACHABLE_TYPES: tuple[type[BaseException], ...] = (
    socket.gaierror,
    httpx.ConnectError,
    ConnectionRefusedError,
)

_CANCELLATION_TYPES: tuple[type[BaseException], ...] = (
    asyncio.CancelledError,
    concurrent.futures.CancelledError,
)


def is_cancellation(exc: BaseException) -> bool:
    """Return True for cooperative-cancellation signals that must propagate."""
    return isinstance(exc, _CANCELLATION_TYPES)


def is_host_unreachable(exc: BaseException) -> bool:
    """Return True when the host could not be resolved or connected to.

    The whole cause chain is searched so wrapped transport errors such as
    ``HttpRequestError`` still classify by their origin.
    """
    return any(isinstance(link, _UNREACHABLE_TYPES) for link in _cause_chain(exc))


def exception_to_code(
    exc: BaseException, *, sentinels: SentinelCodes = DEFAULT_SENTINELS
) -> int:
    """Map a transport exception to its sentinel response code."""
    if is_host_unreachable(exc):
        return sentinels.network_error
    return sentinels.unknown_error


def _cause_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` and its explicit causes, each at most once.

    Implicit ``__context__`` links are not followed: an error raised while
    handling a connect failure says nothing about host reachability.
    """
    seen: set[int] = set()
    pending: list[BaseException] = [exc]
    while pending:
        current = pending.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        for linked in (current.__cause__, getattr(current, "cause", None)):
            if isinstance(linked, BaseException):
                pending.append(linked)
