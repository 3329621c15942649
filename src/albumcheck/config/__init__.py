"""Application configuration helpers."""

from __future__ import annotations

from .app import AlbumCheckConfig, get_albumcheck_config, get_resilience_config
from .env import env_flag, optional_positive_float, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .lastfm import LastFmConfig, lastfm_config_from_values
from .logging import configure_logging
from .reconcile import ReconcileConfig, get_reconcile_config
from .subsonic import SubsonicConfig, subsonic_config_from_values

__all__ = [
    "AlbumCheckConfig",
    "ConfigurationError",
    "LastFmConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ReconcileConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "SubsonicConfig",
    "configure_logging",
    "env_flag",
    "get_albumcheck_config",
    "get_reconcile_config",
    "get_resilience_config",
    "lastfm_config_from_values",
    "optional_positive_float",
    "require_env_vars",
    "subsonic_config_from_values",
]
