"""Response code constants and request status values.

Codes below 100 or above 599 never come from a server; they are sentinels
used when no real HTTP status is available.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Presentation-only
ONGOING = 0

# Success
SUCCESS = 200
SUCCESS_NO_CONTENT = 204

# Client failure
UNAUTHORIZED = 401
INVALID_EMAIL = 404
UNPROCESSABLE_ENTITY = 422
FORCE_UPDATE = 426

# Server failure
SERVER_ERROR = 500

# Transport sentinels
NETWORK_ERROR = 503
UNKNOWN_ERROR = 512


class RequestStatus(str, Enum):
    """Lifecycle state of one request as seen by a presentation layer."""

    ONGOING = "ongoing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SentinelCodes:
    """Codes reported for failures that never produced a response."""

    network_error: int = NETWORK_ERROR
    unknown_error: int = UNKNOWN_ERROR


DEFAULT_SENTINELS = SentinelCodes()


def is_successful(status_code: int) -> bool:
    """Return True for 2xx status codes."""
    return 200 <= status_code <= 299
