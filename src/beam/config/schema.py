"""Config schema and accessor."""

from __future__ import annotations

import os
from typing import Any

from loguru import logger

from beam.core.errors import BeamConfigurationError

# Env keys that override config (loaded once per reload)
_ENV_OVERRIDE_KEYS = (
    "BEAM_TRACE_DISPATCH",
    "BEAM_LOG_LEVEL",
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _load_env_overrides() -> dict[str, str]:
    return {k: os.environ.get(k, "") for k in _ENV_OVERRIDE_KEYS}


def _parse_bool_env(val: str) -> bool | None:
    """Parse env string to bool; None if not a recognized bool."""
    v = val.lower()
    if v in ("1", "true", "yes"):
        return True
    if v in ("0", "false", "no"):
        return False
    return None


class Config:
    """Config accessor with attribute-style access for nested keys."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}
        self._env: dict[str, str] = _load_env_overrides()

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data and re-read env overrides."""
        self._data = data or {}
        self._env = _load_env_overrides()
        if validate:
            self._validate()
        logger.debug(
            "Config reloaded: trace_dispatch={}, log_level={}",
            self.trace_dispatch,
            self.log_level,
        )

    def _validate(self) -> None:
        """Validate config structure; raise BeamConfigurationError on failure."""
        door = self._data.get("door")
        if door is not None and not isinstance(door, dict):
            raise BeamConfigurationError(
                "door must be a mapping",
                code="invalid_door",
                details={"type": type(door).__name__},
            )
        visitors = self.door.get("visitors")
        if visitors is not None and not (
            isinstance(visitors, list) and all(isinstance(v, str) and v for v in visitors)
        ):
            raise BeamConfigurationError(
                "door.visitors must be a list of names",
                code="invalid_visitors",
                details={"value": visitors},
            )
        if self.log_level not in LOG_LEVELS:
            raise BeamConfigurationError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}",
                code="invalid_log_level",
                details={"value": self.log_level},
            )

    @property
    def raw(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-separated path (e.g. 'door.locked')."""
        parts = key.split(".")
        obj: Any = self._data
        for part in parts:
            if isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj

    @property
    def trace_dispatch(self) -> bool:
        """Log every listener invocation at DEBUG. Env BEAM_TRACE_DISPATCH wins."""
        parsed = _parse_bool_env(self._env.get("BEAM_TRACE_DISPATCH", ""))
        if parsed is not None:
            return parsed
        return bool(self.get("trace_dispatch", False))

    @property
    def log_level(self) -> str:
        env_val = self._env.get("BEAM_LOG_LEVEL", "").strip()
        if env_val:
            return env_val.upper()
        return str(self._data.get("log_level", "INFO")).upper()

    @property
    def door(self) -> dict[str, Any]:
        """Door demo section."""
        d = self._data.get("door")
        return d if isinstance(d, dict) else {}

    @property
    def door_locked(self) -> bool:
        return bool(self.get("door.locked", False))

    @property
    def door_visitors(self) -> list[str]:
        v = self.door.get("visitors")
        return list(v) if isinstance(v, list) else []


# Global config instance (set by __main__)
cfg: Config = Config({})
