"""Load the static credentials file."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from logging import getLogger
from pathlib import Path
from typing import Final

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .env import optional_env_vars
from .errors import InvalidConfigurationError, MissingConfigurationError

log = getLogger(__name__)

DEFAULT_CONFIG_PATH: Final[str] = "config.json"
CONFIG_PATH_ENV: Final[str] = "CDSHELF_CONFIG"


@dataclass(frozen=True, slots=True)
class CdShelfConfig:
    """Credentials needed to talk to Last.fm."""

    author_name: str = ""
    api_key: str = ""
    api_secret: str = ""
    app_name: str = ""


class _ConfigFile(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    author_name: str = Field(default="", validation_alias=AliasChoices("AuthorName", "author_name"))
    api_key: str = Field(default="", validation_alias=AliasChoices("APIKey", "api_key"))
    api_secret: str = Field(default="", validation_alias=AliasChoices("APISecret", "api_secret"))
    app_name: str = Field(default="", validation_alias=AliasChoices("AppName", "app_name"))


def default_config_path() -> Path:
    return Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


def load_config(path: str | Path | None = None) -> CdShelfConfig:
    """Read the JSON configuration file, then apply environment overrides.

    ``LASTFM_API_KEY`` and ``LASTFM_API_SECRET`` replace the file values when set.
    A missing file raises :class:`MissingConfigurationError`, unparsable content
    raises :class:`InvalidConfigurationError`.
    """

    config_path = Path(path) if path is not None else default_config_path()
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise MissingConfigurationError(f"{config_path} doesn't exist") from exc
    except OSError as exc:
        raise MissingConfigurationError(f"Couldn't read {config_path}: {exc}") from exc

    try:
        payload = _ConfigFile.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidConfigurationError(f"Couldn't parse {config_path}: {exc}") from exc

    config = CdShelfConfig(
        author_name=payload.author_name,
        api_key=payload.api_key,
        api_secret=payload.api_secret,
        app_name=payload.app_name,
    )

    overrides = optional_env_vars(("LASTFM_API_KEY", "LASTFM_API_SECRET"))
    if "LASTFM_API_KEY" in overrides:
        config = replace(config, api_key=overrides["LASTFM_API_KEY"])
    if "LASTFM_API_SECRET" in overrides:
        config = replace(config, api_secret=overrides["LASTFM_API_SECRET"])

    log.debug("Loaded configuration from %s", config_path)
    return config
