"""Config: YAML over defaults + env overlay."""

from beam.config.loader import DEFAULTS, load_config, load_config_with_env
from beam.config.schema import Config, cfg

__all__ = ["DEFAULTS", "Config", "cfg", "load_config", "load_config_with_env"]
