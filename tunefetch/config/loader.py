"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  -- static defaults checked into the repo
  2. .env file           -- local overrides (not committed)
  3. Environment vars    -- set at deploy time

The YAML file is grouped by concern; ``_flatten`` maps its sections onto
the flat ``Settings`` field names:

    mirrors:
      servers: [...]        -> mirror_servers
      region: NP            -> region
    transport:
      user_agent: ...       -> user_agent
      request_timeout: 10   -> request_timeout
    app:
      env: development      -> app_env
    logging:
      level: INFO           -> log_level
"""

from pathlib import Path
from typing import Any

import yaml

from tunefetch.config.settings import Settings
from tunefetch.utils.errors import ConfigurationError

_FIELD_MAP: dict[tuple[str, str], str] = {
    ("mirrors", "servers"): "mirror_servers",
    ("mirrors", "region"): "region",
    ("transport", "user_agent"): "user_agent",
    ("transport", "request_timeout"): "request_timeout",
    ("app", "env"): "app_env",
    ("logging", "level"): "log_level",
}


def load_config(path: str = "config/config.yaml") -> dict[str, Any]:
    """Read the YAML config file and return its raw sections.

    A missing file yields an empty dict so the defaults in ``Settings`` apply.
    """
    config_path = Path(path)
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        yaml_config = yaml.safe_load(f) or {}
    if not isinstance(yaml_config, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    return yaml_config


def load_settings(path: str = "config/config.yaml") -> Settings:
    """Build ``Settings`` from the YAML file, with env / .env taking priority.

    Raises:
        ConfigurationError: If the YAML values fail validation (for example an
            empty mirror list).
    """
    values = _flatten(load_config(path))
    try:
        return Settings(**values)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration in {path}: {exc}") from exc


def _flatten(yaml_config: dict[str, Any]) -> dict[str, Any]:
    """Map nested YAML sections onto flat Settings field names."""
    values: dict[str, Any] = {}
    for (section, key), field_name in _FIELD_MAP.items():
        block = yaml_config.get(section)
        if isinstance(block, dict) and key in block:
            values[field_name] = block[key]
    return values
