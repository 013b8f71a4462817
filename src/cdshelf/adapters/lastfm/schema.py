"""Pydantic models describing the Last.fm API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class LastFmBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ImageModel(LastFmBaseModel):
    size: str = ""
    url: str = Field(default="", alias="#text")


class WikiPayload(LastFmBaseModel):
    published: str | None = None
    summary: str = ""
    content: str = ""


class AlbumInfoPayload(LastFmBaseModel):
    name: str
    artist: str
    url: str = ""
    mbid: str | None = None
    releasedate: str | None = None
    image: list[ImageModel] = Field(default_factory=list)
    wiki: WikiPayload | None = None

    @field_validator("artist", mode="before")
    @classmethod
    def _artist_name(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            return mapping_value.get("name", mapping_value.get("#text"))
        return value

    _normalize_mbid = field_validator("mbid", "releasedate", mode="before")(_blank_to_none)


class AlbumInfoResponse(LastFmBaseModel):
    album: AlbumInfoPayload


class TagPayload(LastFmBaseModel):
    name: str
    url: str = ""
    count: int | None = None


class TopTagsAttr(LastFmBaseModel):
    artist: str | None = None
    album: str | None = None


class TopTags(LastFmBaseModel):
    tag: list[TagPayload] = Field(default_factory=list)
    attr: TopTagsAttr | None = Field(default=None, alias="@attr")

    @model_validator(mode="before")
    @classmethod
    def _normalize_single_tag(cls, value: object) -> object:
        # A single tag is sent as an object rather than a one-element list.
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            tag_value = mapping_value.get("tag")
            if isinstance(tag_value, Mapping):
                data: dict[str, object] = dict(mapping_value)
                data["tag"] = [tag_value]
                return data
        return value


class TopTagsResponse(LastFmBaseModel):
    toptags: TopTags


class TokenResponse(LastFmBaseModel):
    token: str


class SessionPayload(LastFmBaseModel):
    name: str
    key: str
    subscriber: int = 0


class SessionResponse(LastFmBaseModel):
    session: SessionPayload


class ErrorResponse(LastFmBaseModel):
    error: int
    message: str = "Last.fm API error"


AlbumInfoInput = AlbumInfoResponse | Mapping[str, object]
TopTagsInput = TopTagsResponse | Mapping[str, object]
