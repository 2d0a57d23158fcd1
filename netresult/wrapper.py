"""Flat, presentation-facing projection of a ``NetworkResult``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from . import codes
from .codes import RequestStatus
from .result import Error, NetworkResult, Success


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class ResponseWrapper(Generic[T, E]):
    """Response state suitable for a single observable UI slot.

    Holders replace the whole wrapper as a call moves from ongoing to a
    terminal state; instances are never mutated.
    """

    response_code: int
    success: bool
    status: RequestStatus
    data: T | None = None
    errors: list[E] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", RequestStatus(self.status))
        if self.status is RequestStatus.ONGOING:
            valid = (
                self.response_code == codes.ONGOING
                and not self.success
                and self.data is None
                and self.errors is None
            )
        elif self.status is RequestStatus.SUCCESS:
            valid = self.success and self.errors is None
        else:
            valid = not self.success and self.data is None
        if not valid:
            raise ValueError(
                f"Inconsistent {self.status.value} wrapper: "
                f"response_code={self.response_code}, success={self.success}, "
                f"data={'set' if self.data is not None else None}, "
                f"errors={'set' if self.errors is not None else None}"
            )

    @classmethod
    def ongoing(cls) -> ResponseWrapper[T, E]:
        """Return the state shown while a call is in flight."""
        return cls(
            response_code=codes.ONGOING,
            success=False,
            status=RequestStatus.ONGOING,
        )

    @classmethod
    def succeeded(cls, code: int, data: T | None) -> ResponseWrapper[T, E]:
        """Return a terminal success state."""
        return cls(
            response_code=code,
            success=True,
            status=RequestStatus.SUCCESS,
            data=data,
        )

    @classmethod
    def failed(cls, code: int, errors: list[E] | None) -> ResponseWrapper[T, E]:
        """Return a terminal failure state."""
        return cls(
            response_code=code,
            success=False,
            status=RequestStatus.FAILED,
            errors=errors,
        )

    @property
    def is_ongoing(self) -> bool:
        """Return True while no terminal state has been reached."""
        return self.status is RequestStatus.ONGOING


def to_response_wrapper(result: NetworkResult[T, E]) -> ResponseWrapper[T, E]:
    """Flatten a result into a ``ResponseWrapper``."""
    if isinstance(result, Success):
        return ResponseWrapper.succeeded(result.code, result.data)
    if isinstance(result, Error):
        return ResponseWrapper.failed(result.code, result.parsed_errors)
    raise TypeError(f"Unsupported result type: {type(result).__name__}")
