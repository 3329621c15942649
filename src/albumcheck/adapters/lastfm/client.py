"""HTTP client for the Last.fm API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from albumcheck.adapters.payloads import parse_json, validate_payload
from albumcheck.domain.errors import PayloadError

from .schema import ErrorResponse, TopAlbumsResponse
from .translator import parse_history_record

if TYPE_CHECKING:
    from albumcheck.adapters.http_resilience import ResilientClient
    from albumcheck.config.lastfm import LastFmConfig
    from albumcheck.domain.cancellation import CancellationToken
    from albumcheck.domain.ports import HistorySource
    from albumcheck.domain.types import HistoryRecord

log = getLogger(__name__)

TOP_ALBUMS_METHOD = "user.gettopalbums"
TOP_ALBUMS_PERIOD = "12month"
DEFAULT_TOP_ALBUMS_LIMIT = 500


class LastFmAPIError(PayloadError):
    """Raised when the Last.fm API returns an application-level error."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class LastFmClient:
    """Reads a user's most played albums of the last twelve months."""

    def __init__(self, *, config: LastFmConfig, client: ResilientClient) -> None:
        self._config = config
        self._client = client

    async def fetch_top(
        self,
        *,
        user: str,
        limit: int = DEFAULT_TOP_ALBUMS_LIMIT,
        token: CancellationToken | None = None,
    ) -> list[HistoryRecord]:
        params = httpx.QueryParams(
            {
                "method": TOP_ALBUMS_METHOD,
                "user": user,
                "api_key": self._config.api_key,
                "format": "json",
                "period": TOP_ALBUMS_PERIOD,
                "limit": limit,
            }
        )
        response = await self._client.get(self._config.base_url, params=params, token=token)
        payload = self._decode(response)
        records = [parse_history_record(album) for album in payload.topalbums.album]
        log.debug("Fetched %s top albums for %s", len(records), user)
        return records

    @staticmethod
    def _decode(response: httpx.Response) -> TopAlbumsResponse:
        payload = parse_json(response, source="Last.fm")
        if isinstance(payload, dict) and "error" in payload:
            error_payload = validate_payload(ErrorResponse, payload, source="Last.fm")
            log.error("Last.fm API error %s: %s", error_payload.error, error_payload.message)
            raise LastFmAPIError(
                f"Last.fm API error {error_payload.error}: {error_payload.message}",
                code=error_payload.error,
            )
        return validate_payload(TopAlbumsResponse, payload, source="Last.fm")


if TYPE_CHECKING:
    _source_check: type[HistorySource] = LastFmClient
