# ruff: noqa: T201

"""Console output for looked-up albums."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cdshelf.domain.album import AlbumMetadata


def print_album_info(metadata: AlbumMetadata) -> None:
    print(metadata.title)
    print(metadata.artist)
    print(metadata.url)
    print(metadata.release_date or "")
    print(metadata.cover_url or "")
    print(metadata.summary)
    print(metadata.content)


def print_tags(tags: Mapping[str, str]) -> None:
    for name, url in tags.items():
        print(name)
        print(url)
    print(len(tags))


def confirm_authorization(url: str) -> None:
    """Ask the user to grant access in a browser and wait for them."""
    print(f"Authorize the cdshelf app at {url}")
    input("Press Enter once you have granted access...")
