from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from cdshelf.adapters.cover import CoverDownloadError, HttpCoverDownloader

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from cdshelf.adapters.http_resilience import ResilienceConfig, ResilientClient

    FactoryBuilder = Callable[
        [Callable[[httpx.Request], httpx.Response]],
        Callable[[ResilienceConfig], ResilientClient],
    ]

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"


def test_download_writes_image_bytes(tmp_path: Path, make_client_factory: FactoryBuilder) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://img.example/300x300.png"
        return httpx.Response(status_code=200, content=PNG_BYTES)

    downloader = HttpCoverDownloader(client_factory=make_client_factory(handler))
    images_dir = tmp_path / "static" / "images"
    images_dir.mkdir(parents=True)
    destination = images_dir / "Pink Floyd-The Wall.png"

    result = downloader("https://img.example/300x300.png", destination)

    assert result == destination
    assert destination.read_bytes() == PNG_BYTES


def test_download_http_error_raises(tmp_path: Path, make_client_factory: FactoryBuilder) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=404)

    downloader = HttpCoverDownloader(client_factory=make_client_factory(handler))
    destination = tmp_path / "cover.png"

    with pytest.raises(CoverDownloadError, match="Couldn't download cover"):
        downloader("https://img.example/missing.png", destination)

    assert not destination.exists()


def test_download_unwritable_destination_raises(
    tmp_path: Path, make_client_factory: FactoryBuilder
) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, content=PNG_BYTES)

    blocker = tmp_path / "static"
    blocker.write_text("not a directory", encoding="utf-8")
    downloader = HttpCoverDownloader(client_factory=make_client_factory(handler))

    with pytest.raises(CoverDownloadError, match="Couldn't write cover"):
        downloader("https://img.example/300x300.png", blocker / "images" / "cover.png")


def test_download_does_not_create_missing_directories(
    tmp_path: Path, make_client_factory: FactoryBuilder
) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=200, content=PNG_BYTES)

    downloader = HttpCoverDownloader(client_factory=make_client_factory(handler))

    with pytest.raises(CoverDownloadError, match="Couldn't write cover"):
        downloader("https://img.example/300x300.png", tmp_path / "AC" / "DC-Back in Black.png")

    assert not (tmp_path / "AC").exists()


def test_download_malformed_url_raises(tmp_path: Path, make_client_factory: FactoryBuilder) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code=200, content=PNG_BYTES)

    downloader = HttpCoverDownloader(client_factory=make_client_factory(handler))
    destination = tmp_path / "cover.png"

    with pytest.raises(CoverDownloadError, match="Couldn't download cover"):
        downloader("http://[::1/x.png", destination)

    assert requests == []
    assert not destination.exists()
