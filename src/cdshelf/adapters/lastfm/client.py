"""HTTP client for the Last.fm API."""

from __future__ import annotations

import asyncio
import hashlib
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from cdshelf.adapters.http_resilience import ResilienceConfig, ResilientClient
from cdshelf.config.lastfm import (
    LASTFM_AUTH_URL,
    LASTFM_BASE_URL,
    LastFmSettings,
    get_lastfm_settings,
)

from .schema import (
    AlbumInfoResponse,
    ErrorResponse,
    SessionResponse,
    TokenResponse,
    TopTagsResponse,
)
from .translator import parse_album_info, parse_top_tags

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from cdshelf.config.settings import CdShelfConfig
    from cdshelf.domain.album import AlbumMetadata, AlbumQuery, Tag
    from cdshelf.domain.ports import AlbumInfoSource

log = getLogger(__name__)

_UNSIGNED_PARAMS = frozenset({"format", "callback", "api_sig"})


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def api_signature(params: Mapping[str, str], secret: str) -> str:
    """Sign a method call: md5 of the sorted ``key + value`` pairs followed by the secret."""

    joined = "".join(
        f"{key}{params[key]}" for key in sorted(params) if key not in _UNSIGNED_PARAMS
    )
    return hashlib.md5(f"{joined}{secret}".encode()).hexdigest()  # noqa: S324


class LastFmAPIError(RuntimeError):
    """Raised when the Last.fm API returns an application-level error."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


def _decode_json(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return None


@dataclass(slots=True)
class LastFmClient:
    settings: LastFmSettings
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    session_key: str | None = None

    def fetch_album_info(self, query: AlbumQuery) -> AlbumMetadata:
        payload = asyncio.run(
            self._call("album.getInfo", {"artist": query.artist, "album": query.album})
        )
        try:
            response = AlbumInfoResponse.model_validate(payload)
        except ValidationError as exc:
            raise LastFmAPIError("Unexpected album.getInfo payload") from exc
        return parse_album_info(response)

    def fetch_top_tags(self, query: AlbumQuery) -> list[Tag]:
        payload = asyncio.run(
            self._call("album.getTopTags", {"artist": query.artist, "album": query.album})
        )
        try:
            response = TopTagsResponse.model_validate(payload)
        except ValidationError as exc:
            raise LastFmAPIError("Unexpected album.getTopTags payload") from exc
        return parse_top_tags(response)

    def request_token(self) -> str:
        payload = asyncio.run(self._call("auth.getToken", {}, signed=True))
        try:
            return TokenResponse.model_validate(payload).token
        except ValidationError as exc:
            raise LastFmAPIError("Unexpected auth.getToken payload") from exc

    def auth_url(self, token: str) -> str:
        params = httpx.QueryParams({"api_key": self.settings.api_key, "token": token})
        return f"{LASTFM_AUTH_URL}?{params}"

    def login_with_token(self, token: str) -> str:
        """Exchange an authorized token for a session key kept on this client."""

        payload = asyncio.run(self._call("auth.getSession", {"token": token}, signed=True))
        try:
            session = SessionResponse.model_validate(payload).session
        except ValidationError as exc:
            raise LastFmAPIError("Unexpected auth.getSession payload") from exc
        self.session_key = session.key
        log.info("Logged in to Last.fm as %s", session.name)
        return session.key

    async def _call(
        self,
        method: str,
        arguments: Mapping[str, str],
        *,
        signed: bool = False,
    ) -> dict[str, object]:
        params: dict[str, str] = {
            "method": method,
            **arguments,
            "api_key": self.settings.api_key,
        }
        if self.session_key is not None:
            params["sk"] = self.session_key
        if signed:
            params["api_sig"] = api_signature(params, self.settings.api_secret)
        params["format"] = "json"

        log.debug("Calling Last.fm %s", method)
        async with self.client_factory(self.settings.resilience) as client:
            return await self._perform_request(
                client=client,
                params=httpx.QueryParams(params),
            )

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        params: httpx.QueryParams,
    ) -> dict[str, object]:
        base_url = self.settings.resilience.base_url or LASTFM_BASE_URL
        response = await client.get(base_url, params=params)

        payload = _decode_json(response)
        if isinstance(payload, dict) and "error" in payload:
            try:
                error_payload = ErrorResponse.model_validate(payload)
            except ValidationError:
                error_payload = ErrorResponse(error=0, message=str(payload.get("message")))
            log.error(f"Last.fm API error {error_payload.error}: {error_payload.message}")
            raise LastFmAPIError(error_payload.message, code=error_payload.error) from None

        response.raise_for_status()

        if not isinstance(payload, dict):
            raise LastFmAPIError("Unexpected Last.fm response payload")

        return payload


def authorize(
    config: CdShelfConfig,
    *,
    confirm: Callable[[str], object] | None = None,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
) -> LastFmClient:
    """Return a client for the configured credentials.

    Missing credentials raise before any request is made. When ``confirm`` is given
    the token handshake runs: ``confirm`` receives the browser authorization URL and
    returns once the user has granted access, then a session key is obtained.
    """

    settings = get_lastfm_settings(config)
    client = LastFmClient(
        settings=settings,
        client_factory=client_factory or _default_client_factory,
    )
    if confirm is not None:
        token = client.request_token()
        confirm(client.auth_url(token))
        client.login_with_token(token)
    return client


if TYPE_CHECKING:
    _source_check: AlbumInfoSource = LastFmClient(settings=get_lastfm_settings(CdShelfConfig()))
