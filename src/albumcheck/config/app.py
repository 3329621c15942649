"""Aggregate configuration for one albumcheck run."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_flag, optional_positive_float, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig
from .lastfm import LASTFM_ENV_VARS, LastFmConfig, lastfm_config_from_values
from .reconcile import ReconcileConfig, get_reconcile_config
from .subsonic import SUBSONIC_ENV_VARS, SubsonicConfig, subsonic_config_from_values


@dataclass(frozen=True)
class AlbumCheckConfig:
    lastfm: LastFmConfig
    subsonic: SubsonicConfig
    resilience: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(name="albumcheck")
    )
    reconcile: ReconcileConfig = field(default_factory=ReconcileConfig)


def get_resilience_config() -> ResilienceConfig:
    per_second = optional_positive_float("SUBSONIC_MAX_REQUESTS_PER_SECOND")
    # One limiter paces every request of the run, Last.fm included.
    ratelimit = None
    if per_second is not None:
        ratelimit = RateLimit(max_calls=1, per_seconds=1.0 / per_second)
    return ResilienceConfig(
        name="albumcheck",
        ratelimit=ratelimit,
        verify_tls=not env_flag("INSECURE_SKIP_VERIFY"),
    )


def get_albumcheck_config() -> AlbumCheckConfig:
    """Load every setting from the environment, reporting all missing names at once."""

    values = require_env_vars((*LASTFM_ENV_VARS, *SUBSONIC_ENV_VARS))
    return AlbumCheckConfig(
        lastfm=lastfm_config_from_values(values),
        subsonic=subsonic_config_from_values(values),
        resilience=get_resilience_config(),
        reconcile=get_reconcile_config(),
    )
