"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def optional_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the subset of the given environment variables that are set and non-blank."""

    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            continue
        values[name] = value.strip()
    return values
