"""Public error handling API: parser and consumer capabilities."""

from .consumer import CompositeErrorConsumer, ErrorConsumer, StatusCodeErrorConsumer
from .normalize import exception_to_code, is_cancellation, is_host_unreachable
from .parser import UNREACHABLE_SERVER_MESSAGE, ErrorParser, JsonErrorsParser

__all__ = [
    "CompositeErrorConsumer",
    "ErrorConsumer",
    "ErrorParser",
    "JsonErrorsParser",
    "StatusCodeErrorConsumer",
    "UNREACHABLE_SERVER_MESSAGE",
    "exception_to_code",
    "is_cancellation",
    "is_host_unreachable",
]
