"""Ports for the external services the export pipeline talks to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from .album import AlbumMetadata, AlbumQuery, Tag


@runtime_checkable
class AlbumInfoSource(Protocol):
    """Read-only album lookups keyed by artist and album title."""

    def fetch_album_info(self, query: AlbumQuery) -> AlbumMetadata: ...

    def fetch_top_tags(self, query: AlbumQuery) -> list[Tag]: ...


@runtime_checkable
class CoverDownloader(Protocol):
    """Callable port that stores the image at ``url`` under ``destination``."""

    def __call__(self, url: str, destination: Path) -> Path: ...
