"""Last.fm configuration values."""

from __future__ import annotations

from dataclasses import dataclass

LASTFM_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_ENV_VARS = ("LASTFM_API_KEY", "LASTFM_USER")


@dataclass(frozen=True)
class LastFmConfig:
    """Holds Last.fm API configuration values."""

    api_key: str
    user_name: str
    base_url: str = LASTFM_BASE_URL


def lastfm_config_from_values(values: dict[str, str]) -> LastFmConfig:
    return LastFmConfig(api_key=values["LASTFM_API_KEY"], user_name=values["LASTFM_USER"])
