"""Public interface for the Last.fm adapter."""

from __future__ import annotations

from .client import LastFmAPIError, LastFmClient, api_signature, authorize
from .schema import AlbumInfoResponse, TopTagsResponse
from .translator import parse_album_info, parse_top_tags

__all__ = [
    "AlbumInfoResponse",
    "LastFmAPIError",
    "LastFmClient",
    "TopTagsResponse",
    "api_signature",
    "authorize",
    "parse_album_info",
    "parse_top_tags",
]
