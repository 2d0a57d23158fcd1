"""Configuration loading with deterministic precedence.

Highest wins:
1) Explicit params
2) ``NETRESULT_``-prefixed environment variables
3) ~/.config/netresult/netresult.yaml
4) Model defaults

Nested keys in environment variable names use ``__``, so
``NETRESULT_HTTP__TIMEOUT_SECONDS=5`` sets ``http.timeout_seconds``.
Values are read as YAML scalars or flow collections.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import DEFAULT_CONFIG_PATH, NetResultSettings

ENV_PREFIX = "NETRESULT_"


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> NetResultSettings:
    """Resolve and validate settings through the standard cascade."""
    return NetResultSettings.model_validate(
        load_config(cli_params=cli_params, environ=environ, config_path=config_path)
    )


def load_config(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> dict[str, Any]:
    """Merge raw configuration layers without validating them."""
    merged: dict[str, Any] = {}
    for layer in (
        _read_yaml(Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH),
        _read_environ(os.environ if environ is None else environ),
        cli_params or {},
    ):
        _deep_update(merged, layer)
    return merged


def _read_yaml(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    document = yaml.safe_load(path.read_text(encoding="utf-8"))
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ValueError(f"Config file must contain a top-level mapping: {path}")
    return document


def _read_environ(environ: Mapping[str, str]) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        keys = [part.lower() for part in name[len(ENV_PREFIX) :].split("__") if part]
        if not keys:
            continue
        node = tree
        for key in keys[:-1]:
            if not isinstance(node.get(key), dict):
                node[key] = {}
            node = node[key]
        node[keys[-1]] = _parse_env_value(raw)
    return tree


def _parse_env_value(raw: str) -> Any:
    """Interpret one env value as YAML, keeping the raw text when that fails."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _deep_update(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _deep_update(current, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_update(target[key], value)
        else:
            target[key] = value
