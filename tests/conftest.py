from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
import pytest

from cdshelf.adapters.http_resilience import ResilienceConfig, ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    ClientFactory = Callable[[ResilienceConfig], ResilientClient]


@pytest.fixture
def make_client_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], ClientFactory]:
    def build(handler: Callable[[httpx.Request], httpx.Response]) -> ClientFactory:
        async def async_handler(request: httpx.Request) -> httpx.Response:
            return handler(request)

        def factory(resilience: ResilienceConfig) -> ResilientClient:
            client = ResilientClient(resilience)
            client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
                base_url=resilience.base_url or "",
                transport=httpx.MockTransport(async_handler),
            )
            return client

        return factory

    return build


@pytest.fixture
def album_info_payload() -> dict[str, object]:
    return {
        "album": {
            "name": "The Wall",
            "artist": "Pink Floyd",
            "mbid": "",
            "url": "https://www.last.fm/music/Pink+Floyd/The+Wall",
            "releasedate": "    30 Nov 1979, 00:00",
            "image": [
                {"#text": "https://img.example/34s.png", "size": "small"},
                {"#text": "https://img.example/64s.png", "size": "medium"},
                {"#text": "https://img.example/174s.png", "size": "large"},
                {"#text": "https://img.example/300x300.png", "size": "extralarge"},
                {"#text": "https://img.example/mega.png", "size": "mega"},
            ],
            "listeners": "1500000",
            "playcount": "90000000",
            "wiki": {
                "published": "10 Feb 2009, 04:00",
                "summary": "The Wall is the eleventh studio album.",
                "content": "The Wall is the eleventh studio album by Pink Floyd.\n\nLong form.",
            },
        }
    }


@pytest.fixture
def top_tags_payload() -> dict[str, object]:
    names = ["progressive rock", "classic rock", "rock", "psychedelic rock", "70s", "concept album"]
    return {
        "toptags": {
            "tag": [
                {"count": 100 - index, "name": name, "url": f"https://www.last.fm/tag/{name}"}
                for index, name in enumerate(names)
            ],
            "@attr": {"artist": "Pink Floyd", "album": "The Wall"},
        }
    }


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "AuthorName": "Jane Doe",
                "APIKey": "file-key",
                "APISecret": "file-secret",
                "AppName": "cdshelf",
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LASTFM_API_KEY", "LASTFM_API_SECRET", "CDSHELF_CONFIG"):
        monkeypatch.delenv(name, raising=False)
