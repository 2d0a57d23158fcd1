"""Typed configuration models for netresult runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from netresult import codes
from netresult.codes import SentinelCodes

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "netresult" / "netresult.yaml"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "netresult"
    environment: str = "dev"


class HttpSettings(BaseModel):
    """Defaults for the httpx client wrappers."""

    base_url: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0)
    follow_redirects: bool = False
    headers: dict[str, str] = Field(default_factory=dict)


class ResultSettings(BaseModel):
    """Sentinel codes reported for calls that never produced a response."""

    network_error_code: int = codes.NETWORK_ERROR
    unknown_error_code: int = codes.UNKNOWN_ERROR

    def sentinels(self) -> SentinelCodes:
        """Return the configured sentinels for ``safe_api_call``."""
        return SentinelCodes(
            network_error=self.network_error_code,
            unknown_error=self.unknown_error_code,
        )


class NetResultSettings(BaseModel):
    """Root runtime settings resolved from the configuration cascade."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    result: ResultSettings = Field(default_factory=ResultSettings)
