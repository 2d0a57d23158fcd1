"""Tagged union describing the outcome of one network call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:
    from netresult.errors.parser import ErrorParser
    from netresult.http.response import ApiResponse


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Completed call with a 2xx status and an optional payload."""

    code: int
    data: T | None = None

    @classmethod
    def from_response(cls, response: ApiResponse[T]) -> Success[T]:
        """Build a success from a response the caller already judged successful."""
        return cls(code=response.status_code, data=response.body)


@dataclass(frozen=True, slots=True)
class Error(Generic[E]):
    """Failed call: a non-2xx response or a transport failure.

    ``is_error_consumed`` tells downstream layers that an ``ErrorConsumer``
    already handled this failure and no further user-facing handling is due.
    """

    code: int
    is_error_consumed: bool = False
    parsed_errors: list[E] | None = None

    @classmethod
    def from_response(
        cls,
        response: ApiResponse[object],
        is_error_consumed: bool,
        error_parser: ErrorParser[E] | None = None,
    ) -> Error[E]:
        """Build an error from a failed response, parsing its body when asked."""
        parsed: list[E] | None = None
        if error_parser is not None:
            parsed = error_parser.parse_errors(response) or None
        return cls(
            code=response.status_code,
            is_error_consumed=is_error_consumed,
            parsed_errors=parsed,
        )


NetworkResult = Union[Success[T], Error[E]]
