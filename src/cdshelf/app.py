"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from cdshelf.adapters.cover import CoverDownloadError, HttpCoverDownloader
from cdshelf.adapters.lastfm import LastFmAPIError
from cdshelf.config.storage import OutputConfig
from cdshelf.domain.album import AlbumMetadata, TagSet, collect_tags
from cdshelf.domain.naming import cover_filename, is_plain_filename, page_filename
from cdshelf.domain.page import build_page, write_page
from cdshelf.ui.console import print_album_info, print_tags

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from cdshelf.domain.album import AlbumPage, AlbumQuery
    from cdshelf.domain.ports import AlbumInfoSource, CoverDownloader


log = getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(slots=True)
class ExportResult:
    """What a single lookup produced on disk."""

    metadata: AlbumMetadata
    tags: TagSet = field(default_factory=dict)
    cover_path: Path | None = None
    page_path: Path | None = None


def export_album(
    query: AlbumQuery,
    *,
    source: AlbumInfoSource,
    downloader: CoverDownloader | None = None,
    output: OutputConfig | None = None,
    now_provider: Callable[[], datetime] = _now,
) -> ExportResult:
    """Look up ``query`` and write its cover image and markdown page.

    A failed metadata lookup propagates to the caller. Tag, cover and page
    failures are logged and the remaining steps still run. A cover or page name
    that is not a plain file name skips that step.
    """

    effective_output = output or OutputConfig()
    effective_downloader = downloader or HttpCoverDownloader()
    log.info("Looking up %r by %r", query.album, query.artist)

    metadata = source.fetch_album_info(query)
    print_album_info(metadata)
    result = ExportResult(metadata=metadata)

    try:
        result.tags = collect_tags(source.fetch_top_tags(query))
    except (LastFmAPIError, httpx.HTTPError):
        log.exception("No tags found")
    else:
        print_tags(result.tags)

    result.cover_path = _download_cover(metadata, effective_downloader, effective_output)

    page = build_page(metadata, result.tags, created_at=now_provider())
    filename = page_filename(metadata.artist, metadata.title)
    result.page_path = _write_page(page, filename, effective_output)

    return result


def _download_cover(
    metadata: AlbumMetadata,
    downloader: CoverDownloader,
    output: OutputConfig,
) -> Path | None:
    url = metadata.cover_url
    if url is None:
        log.warning("No cover image available for %s - %s", metadata.artist, metadata.title)
        return None

    filename = cover_filename(metadata.artist, metadata.title)
    if not is_plain_filename(filename):
        log.error("Skipping cover download: %r is not a plain file name", filename)
        return None

    try:
        images_dir = output.ensure_images_dir()
    except OSError:
        log.exception("Couldn't create %s", output.images_dir)
        return None

    try:
        return downloader(url, images_dir / filename)
    except CoverDownloadError:
        log.exception("Cover download failed")
        return None


def _write_page(page: AlbumPage, filename: str, output: OutputConfig) -> Path | None:
    if not is_plain_filename(filename):
        log.error("Skipping page: %r is not a plain file name", filename)
        return None

    path = output.content_dir / filename
    try:
        write_page(page, output.ensure_content_dir() / filename)
    except OSError:
        log.exception("Couldn't write %s", path)
        return None
    log.info("Wrote %s", path)
    return path
