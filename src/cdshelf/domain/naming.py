"""Deterministic output filenames."""

from __future__ import annotations

import re
from pathlib import Path

_WHITESPACE = re.compile(r"\s")
_RESERVED_NAMES = frozenset({"", ".", ".."})


def underscore_whitespace(value: str) -> str:
    """Replace every whitespace character with an underscore.

    >>> underscore_whitespace("Pink Floyd")
    'Pink_Floyd'
    """

    return _WHITESPACE.sub("_", value)


def is_plain_filename(name: str) -> bool:
    """Whether ``name`` names an entry directly inside a directory.

    >>> is_plain_filename("AC/DC-Back in Black.png")
    False
    """

    return name not in _RESERVED_NAMES and "\x00" not in name and Path(name).name == name


def album_name(artist: str, title: str) -> str:
    return f"{artist}-{title}"


def cover_filename(artist: str, title: str) -> str:
    return f"{album_name(artist, title)}.png"


def page_filename(artist: str, title: str) -> str:
    return f"{underscore_whitespace(artist)}-{underscore_whitespace(title)}.md"
