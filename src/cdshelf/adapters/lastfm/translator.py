"""Translate Last.fm payloads into domain values."""

from __future__ import annotations

from cdshelf.domain.album import AlbumMetadata, Tag

from .schema import AlbumInfoInput, AlbumInfoResponse, TopTagsInput, TopTagsResponse


def parse_album_info(payload: AlbumInfoInput) -> AlbumMetadata:
    response = (
        payload
        if isinstance(payload, AlbumInfoResponse)
        else AlbumInfoResponse.model_validate(payload)
    )
    album = response.album
    wiki = album.wiki
    return AlbumMetadata(
        artist=album.artist,
        title=album.name,
        url=album.url,
        release_date=album.releasedate,
        images=tuple(image.url for image in album.image),
        summary=wiki.summary if wiki else "",
        content=wiki.content if wiki else "",
    )


def parse_top_tags(payload: TopTagsInput) -> list[Tag]:
    response = (
        payload if isinstance(payload, TopTagsResponse) else TopTagsResponse.model_validate(payload)
    )
    return [Tag(name=tag.name, url=tag.url) for tag in response.toptags.tag]
