"""HTTP client for the Subsonic ``search3`` endpoint.

Authentication follows the Subsonic token scheme: ``t = md5(password + s)`` with a
salt ``s`` sent in clear next to it. This is a wire-compatibility requirement of the
server, not a security boundary. The hash is one non-iterated MD5 and the salt is a
guessable timestamp. Anyone who sees a request can replay it or brute-force the
password offline. Prefer HTTPS between albumcheck and the server.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from datetime import datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from albumcheck.adapters.payloads import parse_json, validate_payload
from albumcheck.domain.errors import PayloadError
from albumcheck.domain.reconciliation import matches, normalize

from .schema import SearchResponse
from .translator import parse_library_candidate

if TYPE_CHECKING:
    from albumcheck.adapters.http_resilience import ResilientClient
    from albumcheck.config.subsonic import SubsonicConfig
    from albumcheck.domain.cancellation import CancellationToken
    from albumcheck.domain.ports import LibrarySource
    from albumcheck.domain.types import HistoryRecord, LibraryCandidate

log = getLogger(__name__)

SEARCH_PATH = "/rest/search3.view"
_SALT_FORMAT = "%Y%m%d%H%M%S"


class SubsonicAPIError(PayloadError):
    """Raised when the server answers with ``status: failed``."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


def timestamp_salt() -> str:
    return datetime.now().strftime(_SALT_FORMAT)  # noqa: DTZ005


def make_token(password: str, salt: str) -> str:
    return hashlib.md5((password + salt).encode(), usedforsecurity=False).hexdigest()


class SubsonicClient:
    """Searches the library by album title and checks records against the results."""

    def __init__(
        self,
        *,
        config: SubsonicConfig,
        client: ResilientClient,
        salt_factory: Callable[[], str] = timestamp_salt,
    ) -> None:
        self._config = config
        self._client = client
        self._salt_factory = salt_factory
        self._search_url = f"{config.server_url.rstrip('/')}{SEARCH_PATH}"

    def _auth_params(self) -> dict[str, str]:
        # Fresh salt per request.
        salt = self._salt_factory()
        return {
            "u": self._config.user_name,
            "t": make_token(self._config.password, salt),
            "s": salt,
            "v": self._config.api_version,
            "c": self._config.client_name,
            "f": "json",
        }

    async def search(
        self,
        title: str,
        *,
        token: CancellationToken | None = None,
    ) -> list[LibraryCandidate]:
        params = httpx.QueryParams({**self._auth_params(), "query": normalize(title)})
        response = await self._client.get(self._search_url, params=params, token=token)
        envelope = validate_payload(
            SearchResponse, parse_json(response, source="Subsonic"), source="Subsonic"
        ).subsonic_response

        if envelope.status == "failed":
            code = envelope.error.code if envelope.error else None
            message = envelope.error.message if envelope.error else "unknown error"
            raise SubsonicAPIError(f"Subsonic API error {code}: {message}", code=code)

        return [parse_library_candidate(album) for album in envelope.search_result3.album]

    async def exists(
        self,
        record: HistoryRecord,
        *,
        token: CancellationToken | None = None,
    ) -> bool:
        candidates = await self.search(record.title, token=token)
        found = matches(record, candidates)
        log.debug(
            "Library %s '%s - %s' (%s candidates)",
            "has" if found else "lacks",
            record.artist_name,
            record.title,
            len(candidates),
        )
        return found


if TYPE_CHECKING:
    _source_check: type[LibrarySource] = SubsonicClient
