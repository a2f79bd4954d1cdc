"""Config loading: YAML file over built-in defaults, .env into the environment."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from beam.core.errors import BeamConfigurationError

DEFAULTS: dict[str, Any] = {
    "log_level": "INFO",
    "trace_dispatch": False,
    "door": {"locked": False, "visitors": []},
}


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a YAML mapping. A missing or empty file yields {}."""
    path = Path(path)
    if not path.exists():
        logger.warning("Config file not found: {}; using defaults", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise BeamConfigurationError(
            f"Cannot parse config {path}",
            code="invalid_yaml",
            details={"path": str(path)},
            original_error=exc,
        ) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BeamConfigurationError(
            f"Config {path} must be a mapping, got {type(data).__name__}",
            code="invalid_structure",
            details={"path": str(path), "type": type(data).__name__},
        )
    return data


def load_config_with_env(
    path: str | Path,
    defaults: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load .env, then merge the YAML file over defaults (DEFAULTS when None)."""
    from dotenv import load_dotenv

    load_dotenv()
    base = copy.deepcopy(DEFAULTS if defaults is None else defaults)
    return _deep_update(base, load_config(path))
