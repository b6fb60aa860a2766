"""Configuration module -- exports Settings and the YAML-backed loaders."""

from tunefetch.config.loader import load_config, load_settings
from tunefetch.config.settings import DEFAULT_MIRROR_SERVERS, Settings

__all__ = ["DEFAULT_MIRROR_SERVERS", "Settings", "load_config", "load_settings"]
