"""Canonical logging field names.

Keeping names centralized prevents drift between callers that bind context
and formatters that emit it.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

# Call outcome fields.
STATUS_CODE = "status_code"
OUTCOME = "outcome"
ERROR_CONSUMED = "error_consumed"
EXCEPTION_TYPE = "exception_type"

OUTCOME_SUCCESS = "success"
OUTCOME_FAILED = "failed"
OUTCOME_TRANSPORT_FAILURE = "transport_failure"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
