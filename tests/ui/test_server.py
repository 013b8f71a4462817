from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import httpx
import pytest

from cdshelf.ui.server import create_server, load_album, render_album

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

ALBUM_BYTES = b"---\ntitle: The Wall\n---\nLong description \xe2\x80\x94 with <b>markup</b>"


@pytest.fixture
def album_root(tmp_path: Path) -> Path:
    (tmp_path / "Pink_Floyd-The_Wall.md").write_bytes(ALBUM_BYTES)
    (tmp_path / "with space.md").write_bytes(b"spaced")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "inner.md").write_bytes(b"inner")
    return tmp_path


@pytest.fixture
def base_url(album_root: Path) -> Iterator[str]:
    server = create_server(album_root, host="127.0.0.1", port=0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def test_existing_album_is_embedded_verbatim(base_url: str) -> None:
    response = httpx.get(f"{base_url}/album/Pink_Floyd-The_Wall.md", trust_env=False)

    assert response.status_code == 200
    assert response.content == (
        b"<h1>Pink_Floyd-The_Wall.md</h1><div>" + ALBUM_BYTES + b"</div>"
    )


def test_percent_encoded_title(base_url: str) -> None:
    response = httpx.get(f"{base_url}/album/with%20space.md", trust_env=False)

    assert response.status_code == 200
    assert response.content == b"<h1>with space.md</h1><div>spaced</div>"


@pytest.mark.parametrize(
    "path",
    [
        "/album/missing.md",
        "/album/",
        "/album/nested",
        "/album/nested/inner.md",
        "/album/..%2Fsecret",
        "/album/a%00b.md",
        "/album/" + "x" * 300 + ".md",
        "/",
        "/other/Pink_Floyd-The_Wall.md",
    ],
)
def test_unknown_paths_are_not_found(base_url: str, path: str) -> None:
    response = httpx.get(f"{base_url}{path}", trust_env=False)

    assert response.status_code == 404


def test_load_album_rejects_path_components(album_root: Path) -> None:
    assert load_album(album_root, "Pink_Floyd-The_Wall.md") == ALBUM_BYTES
    assert load_album(album_root, "..") is None
    assert load_album(album_root, "nested/inner.md") is None
    assert load_album(album_root, "a\x00b.md") is None


def test_load_album_unreadable_names_are_missing(album_root: Path) -> None:
    assert load_album(album_root, "x" * 300 + ".md") is None


def test_render_album_escapes_title_only() -> None:
    assert render_album("<t>", b"<b>raw</b>") == b"<h1>&lt;t&gt;</h1><div><b>raw</b></div>"
