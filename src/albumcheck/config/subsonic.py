"""Subsonic configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

SUBSONIC_ENV_VARS = ("SUBSONIC_SERVER", "SUBSONIC_USER", "SUBSONIC_PASSWORD")
SUBSONIC_API_VERSION = "1.16.1"
SUBSONIC_CLIENT_NAME = "albumcheck"


@dataclass(frozen=True)
class SubsonicConfig:
    """Holds Subsonic server location and credentials."""

    server_url: str
    user_name: str
    password: str = field(repr=False)
    api_version: str = SUBSONIC_API_VERSION
    client_name: str = SUBSONIC_CLIENT_NAME


def subsonic_config_from_values(values: dict[str, str]) -> SubsonicConfig:
    return SubsonicConfig(
        server_url=values["SUBSONIC_SERVER"].strip().rstrip("/"),
        user_name=values["SUBSONIC_USER"],
        password=values["SUBSONIC_PASSWORD"],
    )
