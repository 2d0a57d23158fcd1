"""Error consumer capability and stock implementations.

A consumer claims a failure it has fully handled through side effects, such
as forcing a logout on ``401``. Claimed failures are flagged on the resulting
``Error`` so downstream layers skip duplicate user-facing handling.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from netresult.http.response import ApiResponse


class ErrorConsumer(Protocol):
    """Decide whether one failed response or exception is already handled."""

    def consume_error(self, response: ApiResponse[Any]) -> bool:
        """Return True when the failed response has been fully handled."""

    def consume_exception(self, exc: Exception) -> bool:
        """Return True when the transport exception has been fully handled."""


class StatusCodeErrorConsumer:
    """Consume responses by status code and exceptions by type.

    ``on_consume`` runs once for every claimed response or exception.
    """

    def __init__(
        self,
        status_codes: Iterable[int],
        *,
        on_consume: Callable[[ApiResponse[Any] | Exception], None] | None = None,
        exception_types: tuple[type[Exception], ...] = (),
    ) -> None:
        self._status_codes = frozenset(status_codes)
        self._on_consume = on_consume
        self._exception_types = exception_types

    def consume_error(self, response: ApiResponse[Any]) -> bool:
        if response.status_code not in self._status_codes:
            return False
        if self._on_consume is not None:
            self._on_consume(response)
        return True

    def consume_exception(self, exc: Exception) -> bool:
        if not self._exception_types or not isinstance(exc, self._exception_types):
            return False
        if self._on_consume is not None:
            self._on_consume(exc)
        return True


class CompositeErrorConsumer:
    """Ask consumers in order; the first one to claim a failure wins."""

    def __init__(self, *consumers: ErrorConsumer) -> None:
        self._consumers = consumers

    def consume_error(self, response: ApiResponse[Any]) -> bool:
        return any(consumer.consume_error(response) for consumer in self._consumers)

    def consume_exception(self, exc: Exception) -> bool:
        return any(consumer.consume_exception(exc) for consumer in self._consumers)
