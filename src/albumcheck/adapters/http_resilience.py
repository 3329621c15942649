"""Retrying HTTP transport shared by the Last.fm and Subsonic clients."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter

from albumcheck.domain.cancellation import CancellationToken
from albumcheck.domain.errors import TransportError, UnexpectedStatusError

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, QueryParamTypes, TimeoutTypes, URLTypes

    from albumcheck.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class RequestOptions(TypedDict, total=False):
    params: QueryParamTypes | None
    headers: HeaderTypes | None


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    verify: bool
    transport: httpx.AsyncBaseTransport


class ResilientClient:
    """One ``httpx.AsyncClient`` plus a fixed-delay retry loop.

    An attempt counts as successful only on status 200. Every other status and every
    ``httpx.HTTPError`` is retried until the policy's attempt budget is spent. The
    optional ``token`` bounds the whole call: it aborts in-flight attempts and the
    waits between them.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )

        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "verify": config.verify_tls,
        }
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if transport is not None:
            client_kwargs["transport"] = transport
        if not config.verify_tls:
            log.warning("TLS certificate verification is disabled for %s", config.name)

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: URLTypes,
        *,
        token: CancellationToken | None = None,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("GET", url, token=token, **kwargs)

    async def request(
        self,
        method: str,
        url: URLTypes,
        *,
        token: CancellationToken | None = None,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        active_token = token or CancellationToken()
        attempts = self.config.retry.attempts
        last_status: int | None = None
        last_error: httpx.HTTPError | None = None

        for attempt in range(1, attempts + 1):
            try:
                response = await active_token.guard(self._send(method, url, **kwargs))
            except httpx.HTTPError as exc:
                last_status, last_error = None, exc
                log.debug(
                    "%s attempt %s/%s failed: %s", self.config.name, attempt, attempts, exc
                )
            else:
                if response.status_code == httpx.codes.OK:
                    return response
                last_status, last_error = response.status_code, None
                await response.aclose()
                log.debug(
                    "%s attempt %s/%s returned status %s",
                    self.config.name,
                    attempt,
                    attempts,
                    last_status,
                )

            if attempt < attempts:
                await active_token.sleep(self.config.retry.delay_seconds)

        if last_status is not None:
            phrase = _reason_phrase(last_status)
            raise UnexpectedStatusError(
                f"request failed with status {last_status}{phrase} after {attempts} attempts",
                status=last_status,
                attempts=attempts,
            )
        detail = f"{type(last_error).__name__}: {last_error}" if last_error else "no response"
        raise TransportError(
            f"failed to get response after {attempts} attempts: {detail}",
            attempts=attempts,
        ) from last_error

    async def _send(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.request(method, url, **kwargs)
        async with self._limiter:
            return await self._client.request(method, url, **kwargs)


def _reason_phrase(status: int) -> str:
    try:
        return f" ({httpx.codes(status).phrase})"
    except ValueError:
        return ""
