"""Last.fm configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .settings import CdShelfConfig

LASTFM_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_AUTH_URL = "https://www.last.fm/api/auth/"
LASTFM_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class LastFmSettings:
    """Holds Last.fm API credentials and client behaviour."""

    api_key: str
    api_secret: str
    resilience: ResilienceConfig


def _user_agent(config: CdShelfConfig) -> str:
    app_name = config.app_name.strip() or "cdshelf"
    author = config.author_name.strip()
    return f"{app_name} ({author})" if author else app_name


def get_lastfm_settings(
    config: CdShelfConfig,
    *,
    resilience: ResilienceConfig | None = None,
) -> LastFmSettings:
    missing = [
        name
        for name, value in (("APIKey", config.api_key), ("APISecret", config.api_secret))
        if not value.strip()
    ]
    if missing:
        missing_list = ", ".join(missing)
        raise MissingConfigurationError(
            f"You need an API key and secret in the configuration (missing: {missing_list})"
        )

    return LastFmSettings(
        api_key=config.api_key,
        api_secret=config.api_secret,
        resilience=resilience
        or ResilienceConfig(
            name="lastfm",
            base_url=LASTFM_BASE_URL,
            timeout_seconds=LASTFM_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=4, per_seconds=1.0),
            default_headers={"User-Agent": _user_agent(config)},
        ),
    )
