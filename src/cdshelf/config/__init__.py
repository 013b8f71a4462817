"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .lastfm import LastFmSettings, get_lastfm_settings
from .logging import configure_logging
from .settings import CdShelfConfig, default_config_path, load_config
from .storage import OutputConfig

__all__ = [
    "CdShelfConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "LastFmSettings",
    "MissingConfigurationError",
    "OutputConfig",
    "RateLimit",
    "ResilienceConfig",
    "configure_logging",
    "default_config_path",
    "get_lastfm_settings",
    "load_config",
]
