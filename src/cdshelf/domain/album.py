"""Album values shared by the pipeline, the adapters and the UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

COVER_IMAGE_INDEX: Final[int] = 3
MAX_TAGS: Final[int] = 5

type TagSet = dict[str, str]


@dataclass(frozen=True, slots=True)
class AlbumQuery:
    """Artist/album pair supplied on the command line."""

    artist: str
    album: str

    def __post_init__(self) -> None:
        if not self.artist.strip() or not self.album.strip():
            raise ValueError("You must give both artist and album names")


@dataclass(frozen=True, slots=True)
class Tag:
    name: str
    url: str


@dataclass(frozen=True, slots=True)
class AlbumMetadata:
    """Read-only projection of an album.getInfo response."""

    artist: str
    title: str
    url: str = ""
    release_date: str | None = None
    images: tuple[str, ...] = ()
    summary: str = ""
    content: str = ""

    @property
    def cover_url(self) -> str | None:
        """The extralarge cover URL, if the service returned one."""
        if len(self.images) <= COVER_IMAGE_INDEX:
            return None
        return self.images[COVER_IMAGE_INDEX].strip() or None

    @property
    def description(self) -> str:
        """Long-form wiki content, falling back to the summary when it is empty."""
        if self.content.strip():
            return self.content
        return self.summary


def collect_tags(tags: Iterable[Tag], *, limit: int = MAX_TAGS) -> TagSet:
    """Map the first ``limit`` tags by name; a repeated name keeps its last URL."""

    collected: TagSet = {}
    for index, tag in enumerate(tags):
        if index >= limit:
            break
        collected[tag.name] = tag.url
    return collected


@dataclass(slots=True)
class AlbumPage:
    title: str
    name: str
    date: datetime
    cover: str
    tags: list[str] = field(default_factory=list)
    content: str = ""
