"""Render album pages as markdown with YAML front matter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import yaml

from .album import AlbumMetadata, AlbumPage
from .naming import album_name, cover_filename

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime
    from pathlib import Path

FRONT_MATTER_DELIMITER: Final[str] = "---"


def build_page(metadata: AlbumMetadata, tags: Mapping[str, str], *, created_at: datetime) -> AlbumPage:
    return AlbumPage(
        title=metadata.title,
        name=album_name(metadata.artist, metadata.title),
        date=created_at,
        cover=cover_filename(metadata.artist, metadata.title),
        tags=list(tags),
        content=metadata.description,
    )


def render_page(page: AlbumPage) -> str:
    """Serialise ``page`` as front matter followed by its content verbatim."""

    front_matter = {
        "date": page.date.isoformat(timespec="seconds"),
        "name": page.name,
        "tags": list(page.tags),
        "title": page.title,
        "cover": page.cover,
    }
    header = yaml.safe_dump(
        front_matter,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"{FRONT_MATTER_DELIMITER}\n{header}{FRONT_MATTER_DELIMITER}\n{page.content}"


def split_page(text: str) -> tuple[dict[str, object], str]:
    """Return the parsed front matter and the body of a rendered page."""

    opening = f"{FRONT_MATTER_DELIMITER}\n"
    closing = f"\n{FRONT_MATTER_DELIMITER}\n"
    if not text.startswith(opening):
        return {}, text
    end = text.find(closing, len(opening) - 1)
    if end == -1:
        raise ValueError("Unterminated front matter block")
    header = yaml.safe_load(text[len(opening) : end + 1]) or {}
    if not isinstance(header, dict):
        raise ValueError("Front matter must be a mapping")
    return header, text[end + len(closing) :]


def write_page(page: AlbumPage, path: Path) -> Path:
    path.write_text(render_page(page), encoding="utf-8")
    return path
