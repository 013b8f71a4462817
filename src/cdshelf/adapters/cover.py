"""Download album cover images."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from cdshelf.adapters.http_resilience import ResilienceConfig, ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from cdshelf.domain.ports import CoverDownloader

log = getLogger(__name__)

_DEFAULT_TIMEOUT_SECONDS = 10.0


class CoverDownloadError(RuntimeError):
    """Raised when a cover image cannot be fetched or stored."""


def _default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(
        name="cover",
        timeout_seconds=_DEFAULT_TIMEOUT_SECONDS,
        follow_redirects=True,
    )


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class HttpCoverDownloader:
    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self, url: str, destination: Path) -> Path:
        return asyncio.run(self._download_async(url, destination))

    async def _download_async(self, url: str, destination: Path) -> Path:
        async with self.client_factory(self.resilience) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise CoverDownloadError(f"Couldn't download cover from {url}: {exc}") from exc

        try:
            destination.write_bytes(response.content)
        except OSError as exc:
            raise CoverDownloadError(f"Couldn't write cover to {destination}: {exc}") from exc

        log.info("Saved cover (%d bytes) to %s", len(response.content), destination)
        return destination


if TYPE_CHECKING:
    _downloader_check: CoverDownloader = HttpCoverDownloader()
