"""Diagnostic logging for the cdshelf entry points."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing import TextIO

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%H:%M:%S"

# Libraries that log every request at INFO.
_CHATTY_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore")


def configure_logging(
    *,
    verbose: bool = False,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Send diagnostics to ``stream`` (stderr by default), keeping stdout for album output.

    ``verbose`` switches the root logger to DEBUG and lets the HTTP client libraries
    log their requests. Pass ``force=True`` to replace handlers installed earlier.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
