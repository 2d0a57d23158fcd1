"""Wrap one network call and classify its outcome as a ``NetworkResult``.

``safe_api_call`` never raises for transport or application failures; every
outcome becomes a terminal ``Success`` or ``Error``. Cooperative cancellation
is the only exception that propagates.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from netresult.codes import DEFAULT_SENTINELS, SentinelCodes
from netresult.errors.normalize import exception_to_code, is_cancellation
from netresult.logging import fields, get_logger, log_context
from netresult.result import Error, NetworkResult, Success

if TYPE_CHECKING:
    from netresult.errors.consumer import ErrorConsumer
    from netresult.errors.parser import ErrorParser
    from netresult.http.response import ApiResponse


T = TypeVar("T")
E = TypeVar("E")

_LOGGER = get_logger(__name__)


def safe_api_call(
    call: Callable[[], ApiResponse[T]],
    *,
    error_parser: ErrorParser[E] | None = None,
    error_consumer: ErrorConsumer | None = None,
    sentinels: SentinelCodes | None = None,
) -> NetworkResult[T, E]:
    """Invoke ``call`` once and classify the outcome."""
    try:
        response = call()
    except Exception as exc:
        if is_cancellation(exc):
            raise
        return _transport_failure(exc, error_consumer, sentinels or DEFAULT_SENTINELS)
    return _classify_response(response, error_parser, error_consumer)


async def safe_api_call_async(
    call: Callable[[], Awaitable[ApiResponse[T]]],
    *,
    error_parser: ErrorParser[E] | None = None,
    error_consumer: ErrorConsumer | None = None,
    sentinels: SentinelCodes | None = None,
) -> NetworkResult[T, E]:
    """Await ``call`` once and classify the outcome.

    ``asyncio.CancelledError`` is not an ``Exception`` subclass and always
    propagates to the awaiting task.
    """
    try:
        response = await call()
    except Exception as exc:
        if is_cancellation(exc):
            raise
        return _transport_failure(exc, error_consumer, sentinels or DEFAULT_SENTINELS)
    return _classify_response(response, error_parser, error_consumer)


def _transport_failure(
    exc: Exception,
    error_consumer: ErrorConsumer | None,
    sentinels: SentinelCodes,
) -> Error[Any]:
    """Build the error for a call that raised before producing a response."""
    code = exception_to_code(exc, sentinels=sentinels)
    consumed = _consume(error_consumer, "consume_exception", exc)
    with log_context(
        {
            fields.STATUS_CODE: code,
            fields.OUTCOME: fields.OUTCOME_TRANSPORT_FAILURE,
            fields.ERROR_CONSUMED: consumed,
            fields.EXCEPTION_TYPE: type(exc).__name__,
        }
    ):
        _LOGGER.warning("network call raised before a response: %s", exc, exc_info=exc)
    return Error(code=code, is_error_consumed=consumed, parsed_errors=None)


def _classify_response(
    response: ApiResponse[T],
    error_parser: ErrorParser[E] | None,
    error_consumer: ErrorConsumer | None,
) -> NetworkResult[T, E]:
    """Turn a received response into ``Success`` or ``Error``."""
    if response.is_successful:
        with log_context(
            {fields.STATUS_CODE: response.status_code, fields.OUTCOME: fields.OUTCOME_SUCCESS}
        ):
            _LOGGER.debug("network call succeeded")
        return Success.from_response(response)

    consumed = _consume(error_consumer, "consume_error", response)
    with log_context(
        {
            fields.STATUS_CODE: response.status_code,
            fields.OUTCOME: fields.OUTCOME_FAILED,
            fields.ERROR_CONSUMED: consumed,
        }
    ):
        _LOGGER.info("network call failed with status %s", response.status_code)
    try:
        return Error.from_response(response, consumed, error_parser)
    except Exception:
        _LOGGER.warning(
            "error parser %s raised for status %s; dropping parsed errors",
            type(error_parser).__name__,
            response.status_code,
            exc_info=True,
        )
        return Error(code=response.status_code, is_error_consumed=consumed)


def _consume(
    error_consumer: ErrorConsumer | None,
    method: str,
    subject: object,
) -> bool:
    """Ask the consumer about one failure; a raising consumer claims nothing."""
    if error_consumer is None:
        return False
    try:
        return bool(getattr(error_consumer, method)(subject))
    except Exception:
        _LOGGER.warning(
            "error consumer %s raised in %s; treating failure as unconsumed",
            type(error_consumer).__name__,
            method,
            exc_info=True,
        )
        return False
