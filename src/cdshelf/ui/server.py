"""Minimal HTTP responder serving album files from a local directory."""

from __future__ import annotations

import argparse
import functools
import html
import logging
import re
import sys
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final
from urllib.parse import unquote, urlsplit

from cdshelf.config import configure_logging
from cdshelf.domain.naming import is_plain_filename

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)

ALBUM_ROUTE: Final[re.Pattern[str]] = re.compile(r"^/album/(?P<title>[^/]+)$")
DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[int] = 8080


def load_album(root: Path, title: str) -> bytes | None:
    """Return the bytes of ``root/title`` or ``None`` if it is not a readable file."""

    if not is_plain_filename(title) or "\\" in title:
        return None
    path = root / title
    try:
        return path.read_bytes()
    except (OSError, ValueError):
        return None


def render_album(title: str, body: bytes) -> bytes:
    heading = html.escape(title).encode("utf-8")
    return b"<h1>" + heading + b"</h1><div>" + body + b"</div>"


class AlbumRequestHandler(BaseHTTPRequestHandler):
    server_version = "cdshelf"

    def __init__(self, *args: Any, root: Path, **kwargs: Any) -> None:
        self.root = root
        super().__init__(*args, **kwargs)

    def do_GET(self) -> None:  # noqa: N802
        match = ALBUM_ROUTE.match(urlsplit(self.path).path)
        if match is None:
            self._send(HTTPStatus.NOT_FOUND, b"<h1>Not Found</h1>")
            return

        title = unquote(match.group("title"))
        body = load_album(self.root, title)
        if body is None:
            self._send(HTTPStatus.NOT_FOUND, b"<h1>Not Found</h1>")
            return

        self._send(HTTPStatus.OK, render_album(title, body))

    def _send(self, status: HTTPStatus, payload: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        log.info("%s - %s", self.address_string(), format % args)


def create_server(
    root: Path,
    *,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> ThreadingHTTPServer:
    handler = functools.partial(AlbumRequestHandler, root=root)
    return ThreadingHTTPServer((host, port), handler)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve album files over HTTP")
    parser.add_argument("--host", type=str, default=DEFAULT_HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to listen on")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path(),
        help="Directory album files are read from (default: current directory)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Serve ``GET /album/<title>`` until interrupted."""
    configure_logging()
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    server = create_server(args.root, host=args.host, port=args.port)
    log.info("Serving %s on http://%s:%s/album/", args.root.resolve(), args.host, args.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("Closed by user (Ctrl+C)")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
