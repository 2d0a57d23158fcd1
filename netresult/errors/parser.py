"""Error parser capability and the stock JSON ``errors`` array parser."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from netresult.logging import get_logger

if TYPE_CHECKING:
    from netresult.http.response import ApiResponse


E = TypeVar("E")
E_co = TypeVar("E_co", covariant=True)

_LOGGER = get_logger(__name__)

UNREACHABLE_SERVER_MESSAGE = "Sorry. Unable to access server. Try Again"


class ErrorParser(Protocol[E_co]):
    """Turn a failed response into typed error records.

    Implementations must not raise; an unreadable body yields ``None`` or a
    placeholder list.
    """

    def parse_errors(self, response: ApiResponse[Any]) -> list[E_co] | None:
        """Return parsed error records, or ``None`` when there are none."""


class JsonErrorsParser(Generic[E]):
    """Parse ``{"errors": [...]}`` bodies into a list of ``item_type`` records.

    A missing body, missing field, or non-array field yields ``None``.
    Malformed JSON and items that fail validation yield ``fallback``.
    """

    def __init__(
        self,
        item_type: type[E] = str,  # type: ignore[assignment]
        *,
        field: str = "errors",
        fallback: Sequence[E] | None = None,
    ) -> None:
        self._adapter: TypeAdapter[list[E]] = TypeAdapter(list[item_type])  # type: ignore[valid-type]
        self._field = field
        self._fallback = list(fallback) if fallback is not None else None

    def parse_errors(self, response: ApiResponse[Any]) -> list[E] | None:
        raw = response.error_body
        if not raw:
            return None

        try:
            document = json.loads(raw)
        except (json.JSONDecodeError, RecursionError):
            _LOGGER.debug(
                "error body for status %s is not valid JSON", response.status_code
            )
            return self._fallback_copy()

        if not isinstance(document, dict):
            return None
        items = document.get(self._field)
        if not isinstance(items, list):
            return None

        try:
            return self._adapter.validate_python(items)
        except ValidationError as exc:
            _LOGGER.debug(
                "error records for status %s failed validation: %s",
                response.status_code,
                exc.error_count(),
            )
            return self._fallback_copy()

    def _fallback_copy(self) -> list[E] | None:
        return list(self._fallback) if self._fallback is not None else None
