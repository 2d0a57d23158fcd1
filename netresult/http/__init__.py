"""Public HTTP API: response abstraction and httpx client wrappers."""

from .client import AsyncHttpClient, HttpClient
from .errors import HttpClientError, HttpError, HttpJsonDecodeError, HttpRequestError
from .response import ApiResponse

__all__ = [
    "ApiResponse",
    "AsyncHttpClient",
    "HttpClient",
    "HttpClientError",
    "HttpError",
    "HttpJsonDecodeError",
    "HttpRequestError",
]
