"""Domain values for album lookups and exported pages."""

from __future__ import annotations

from .album import (
    COVER_IMAGE_INDEX,
    MAX_TAGS,
    AlbumMetadata,
    AlbumPage,
    AlbumQuery,
    Tag,
    TagSet,
    collect_tags,
)
from .naming import cover_filename, is_plain_filename, page_filename, underscore_whitespace

__all__ = [
    "COVER_IMAGE_INDEX",
    "MAX_TAGS",
    "AlbumMetadata",
    "AlbumPage",
    "AlbumQuery",
    "Tag",
    "TagSet",
    "collect_tags",
    "cover_filename",
    "is_plain_filename",
    "page_filename",
    "underscore_whitespace",
]
