"""Public API for netresult configuration utilities."""

from .loader import ENV_PREFIX, load_config, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    HttpSettings,
    LoggingSettings,
    NetResultSettings,
    ResultSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "HttpSettings",
    "LoggingSettings",
    "NetResultSettings",
    "ResultSettings",
    "load_config",
    "load_settings",
]
