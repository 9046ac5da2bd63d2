"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    unsplash_access_key: str | None = None
    unsplash_base_url: str = "https://api.unsplash.com"
    balloon_feed_base_url: str = "https://a.windbornesystems.com/treasure"
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    nominatim_user_agent: str = "BalloonPhotoGuesser/1.0"
    open_meteo_base_url: str = "https://api.open-meteo.com/v1"
    photo_cache_path: str = "cache/photos.json"
    photo_cache_ttl_hours: int = 24
    rounds_per_game: int = 5
    http_timeout_seconds: float = 5.0
    feed_timeout_seconds: float = 10.0
    cors_allow_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins
