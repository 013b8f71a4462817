from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cdshelf.adapters.lastfm import authorize
from cdshelf.app import export_album
from cdshelf.config import (
    ConfigurationError,
    OutputConfig,
    configure_logging,
    load_config,
)
from cdshelf.domain.album import AlbumQuery
from cdshelf.ui.console import confirm_authorization

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

USAGE = '%(prog)s -a "<artist>" -l "<album>"'
DESCRIPTION = (
    "Look up <artist> and <album> on Last.fm, print the album information, "
    "download its cover and write a markdown page for it."
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cdshelf", usage=USAGE, description=DESCRIPTION)
    parser.add_argument(
        "--artist",
        "-a",
        type=str,
        required=True,
        help='Artist name. Enclose between "" if not a single word',
    )
    parser.add_argument(
        "--album",
        "-l",
        type=str,
        required=True,
        help='Album title. Enclose between "" if not a single word',
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the JSON credentials file (default: $CDSHELF_CONFIG or config.json)",
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=Path(),
        help="Directory holding static/images and content (default: current directory)",
    )
    parser.add_argument(
        "--login",
        action="store_true",
        help="Authorize the application in a browser and start a Last.fm session",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output",
    )
    return parser


def _parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, AlbumQuery]:
    parser = _build_parser()
    args = parser.parse_args(list(argv))
    try:
        query = AlbumQuery(artist=args.artist, album=args.album)
    except ValueError as exc:
        parser.error(str(exc))
    return args, query


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args, query = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        config = load_config(parsed_args.config)
        client = authorize(
            config,
            confirm=confirm_authorization if parsed_args.login else None,
        )
        result = export_album(
            query,
            source=client,
            output=OutputConfig(root=parsed_args.output_root),
        )
    except ConfigurationError as exc:
        log.error("Configuration error: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during lookup")
        sys.exit(1)

    log.info(
        "Finished %s - %s: cover=%s, page=%s",
        result.metadata.artist,
        result.metadata.title,
        result.cover_path,
        result.page_path,
    )


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
