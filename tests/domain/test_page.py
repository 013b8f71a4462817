from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from typing import TYPE_CHECKING

import pytest

from cdshelf.domain.album import AlbumMetadata, AlbumPage
from cdshelf.domain.page import build_page, render_page, split_page, write_page

if TYPE_CHECKING:
    from pathlib import Path

CREATED_AT = datetime(2024, 3, 1, 18, 30, 5, tzinfo=timezone(timedelta(hours=1)))


def _metadata(*, summary: str, content: str) -> AlbumMetadata:
    return AlbumMetadata(
        artist="Pink Floyd",
        title="The Wall",
        url="https://www.last.fm/music/Pink+Floyd/The+Wall",
        images=("s", "m", "l", "xl"),
        summary=summary,
        content=content,
    )


def test_build_page_fields() -> None:
    page = build_page(
        _metadata(summary="S", content="C"),
        {"rock": "u1", "prog": "u2"},
        created_at=CREATED_AT,
    )

    assert page.title == "The Wall"
    assert page.name == "Pink Floyd-The Wall"
    assert page.cover == "Pink Floyd-The Wall.png"
    assert page.tags == ["rock", "prog"]
    assert page.date == CREATED_AT


def test_render_page_front_matter() -> None:
    page = build_page(_metadata(summary="S", content="C"), {"rock": "u1"}, created_at=CREATED_AT)

    header, body = split_page(render_page(page))

    assert header == {
        "date": "2024-03-01T18:30:05+01:00",
        "name": "Pink Floyd-The Wall",
        "tags": ["rock"],
        "title": "The Wall",
        "cover": "Pink Floyd-The Wall.png",
    }
    assert body == "C"


def test_render_page_starts_with_delimiter() -> None:
    page = AlbumPage(title="T", name="A-T", date=datetime(2024, 1, 1, tzinfo=UTC), cover="A-T.png")

    text = render_page(page)

    assert text.startswith("---\ndate: ")
    assert text.endswith("---\n")


@pytest.mark.parametrize(
    ("summary", "content", "expected"),
    [
        ("S", "", "S"),
        ("S", "Full description\n\nwith paragraphs", "Full description\n\nwith paragraphs"),
    ],
)
def test_page_body_uses_description_or_summary(
    tmp_path: Path, summary: str, content: str, expected: str
) -> None:
    page = build_page(_metadata(summary=summary, content=content), {}, created_at=CREATED_AT)

    path = write_page(page, tmp_path / "page.md")

    _, body = split_page(path.read_text(encoding="utf-8"))
    assert body == expected


def test_split_page_without_front_matter() -> None:
    assert split_page("just text") == ({}, "just text")


def test_split_page_unterminated_front_matter() -> None:
    with pytest.raises(ValueError, match="Unterminated"):
        split_page("---\ntitle: x\n")
