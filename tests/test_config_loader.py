"""Tests for the configuration cascade and settings models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from netresult import codes
from netresult.codes import SentinelCodes
from netresult.config import load_config, load_settings


def test_load_settings_applies_precedence_cascade(tmp_path: Path) -> None:
    """Explicit params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "netresult.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  service: mobile-api",
                "http:",
                "  base_url: https://yaml.example.test",
                "  timeout_seconds: 3.5",
                "result:",
                "  unknown_error_code: 520",
            ]
        ),
        encoding="utf-8",
    )

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        environ={
            "NETRESULT_LOGGING__LEVEL": "ERROR",
            "NETRESULT_HTTP__BASE_URL": "https://env.example.test",
            "NETRESULT_HTTP__FOLLOW_REDIRECTS": "true",
            "NETRESULT_RESULT__NETWORK_ERROR_CODE": "599",
            "OTHER_SETTING": "ignored",
        },
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.logging.service == "mobile-api"
    assert settings.http.base_url == "https://env.example.test"
    assert settings.http.timeout_seconds == 3.5
    assert settings.http.follow_redirects is True
    assert settings.result.sentinels() == SentinelCodes(network_error=599, unknown_error=520)


def test_load_settings_uses_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "missing.yaml", environ={})

    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is True
    assert settings.logging.service == "netresult"
    assert settings.http.timeout_seconds == 10.0
    assert settings.http.headers == {}
    assert settings.result.network_error_code == codes.NETWORK_ERROR
    assert settings.result.unknown_error_code == codes.UNKNOWN_ERROR


def test_load_config_coerces_env_json_values(tmp_path: Path) -> None:
    """JSON-looking env values should be decoded into structures."""
    merged = load_config(
        environ={"NETRESULT_HTTP__HEADERS": '{"Accept": "application/json"}'},
        config_path=tmp_path / "missing.yaml",
    )

    assert merged["http"]["headers"] == {"Accept": "application/json"}


def test_empty_yaml_file_is_ignored(tmp_path: Path) -> None:
    """An empty YAML document should contribute nothing."""
    config_file = tmp_path / "netresult.yaml"
    config_file.write_text("", encoding="utf-8")

    settings = load_settings(config_path=config_file, environ={})

    assert settings.logging.level == "INFO"


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    """A YAML list at the top level should be rejected."""
    config_file = tmp_path / "netresult.yaml"
    config_file.write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        load_settings(config_path=config_file, environ={})


def test_invalid_values_fail_validation(tmp_path: Path) -> None:
    """Out-of-range values should surface as pydantic validation errors."""
    with pytest.raises(ValidationError):
        load_settings(
            environ={"NETRESULT_HTTP__TIMEOUT_SECONDS": "0"},
            config_path=tmp_path / "missing.yaml",
        )
