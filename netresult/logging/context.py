"""Structured logging context held in a ``ContextVar``.

Each thread and asyncio task sees its own copy, so fields bound around one
call never leak into a concurrent one.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_FIELDS: ContextVar[Mapping[str, str]] = ContextVar("netresult_log_fields", default={})


def get_context() -> dict[str, str]:
    """Return a copy of the fields currently bound."""
    return dict(_FIELDS.get())


def bind_context(**values: object) -> None:
    """Add fields to the current context; ``None`` values are skipped."""
    _FIELDS.set(_with_fields(_FIELDS.get(), values))


def clear_context(*keys: str) -> None:
    """Drop the named fields, or every field when none are named."""
    if keys:
        _FIELDS.set({k: v for k, v in _FIELDS.get().items() if k not in keys})
    else:
        _FIELDS.set({})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind fields for the duration of a block."""
    token = _FIELDS.set(_with_fields(_FIELDS.get(), values))
    try:
        yield
    finally:
        _FIELDS.reset(token)


def _with_fields(base: Mapping[str, str], values: Mapping[str, object]) -> dict[str, str]:
    merged = dict(base)
    merged.update({str(k): str(v) for k, v in values.items() if v is not None})
    return merged
