"""Normalize the outcome of one network call into a matchable result.

Typical use::

    result = safe_api_call(
        lambda: client.get("/profile", model=Profile),
        error_parser=JsonErrorsParser(str),
    )
    state = to_response_wrapper(result)
"""

from . import codes
from .calls import safe_api_call, safe_api_call_async
from .codes import DEFAULT_SENTINELS, RequestStatus, SentinelCodes
from .errors import (
    UNREACHABLE_SERVER_MESSAGE,
    CompositeErrorConsumer,
    ErrorConsumer,
    ErrorParser,
    JsonErrorsParser,
    StatusCodeErrorConsumer,
)
from .http import ApiResponse, AsyncHttpClient, HttpClient
from .result import Error, NetworkResult, Success
from .wrapper import ResponseWrapper, to_response_wrapper

__all__ = [
    "ApiResponse",
    "AsyncHttpClient",
    "CompositeErrorConsumer",
    "DEFAULT_SENTINELS",
    "Error",
    "ErrorConsumer",
    "ErrorParser",
    "HttpClient",
    "JsonErrorsParser",
    "NetworkResult",
    "RequestStatus",
    "ResponseWrapper",
    "SentinelCodes",
    "StatusCodeErrorConsumer",
    "Success",
    "UNREACHABLE_SERVER_MESSAGE",
    "codes",
    "safe_api_call",
    "safe_api_call_async",
    "to_response_wrapper",
]
