from __future__ import annotations

import os

import pytest

from albumcheck.config import (
    AlbumCheckConfig,
    LastFmConfig,
    ReconcileConfig,
    ResilienceConfig,
    RetryPolicy,
    SubsonicConfig,
)

for _name in (
    "IGNORE_FILE",
    "VERBOSE",
    "INSECURE_SKIP_VERIFY",
    "SUBSONIC_MAX_REQUESTS_PER_SECOND",
    "ALBUMCHECK_DEADLINE_SECONDS",
):
    os.environ.pop(_name, None)


@pytest.fixture
def resilience_config() -> ResilienceConfig:
    return ResilienceConfig(name="test", retry=RetryPolicy(attempts=3, delay_seconds=0.0))


@pytest.fixture
def lastfm_config() -> LastFmConfig:
    return LastFmConfig(
        api_key="demo-key",
        user_name="demo-user",
        base_url="https://lastfm.test/2.0/",
    )


@pytest.fixture
def subsonic_config() -> SubsonicConfig:
    return SubsonicConfig(
        server_url="https://music.test",
        user_name="listener",
        password="sesame",
    )


@pytest.fixture
def albumcheck_config(
    lastfm_config: LastFmConfig,
    subsonic_config: SubsonicConfig,
    resilience_config: ResilienceConfig,
) -> AlbumCheckConfig:
    return AlbumCheckConfig(
        lastfm=lastfm_config,
        subsonic=subsonic_config,
        resilience=resilience_config,
        reconcile=ReconcileConfig(deadline_seconds=10.0),
    )
