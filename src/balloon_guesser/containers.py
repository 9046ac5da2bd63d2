"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from balloon_guesser.adapters.balloon_feed_client import HttpxBalloonFeedClient
from balloon_guesser.adapters.json_photo_cache_store import JsonFilePhotoCacheStore
from balloon_guesser.adapters.nominatim_client import HttpxNominatimClient
from balloon_guesser.adapters.open_meteo_client import HttpxOpenMeteoClient
from balloon_guesser.adapters.unsplash_client import HttpxUnsplashClient
from balloon_guesser.config import Settings
from balloon_guesser.services.balloon_feed import BalloonFeedReader
from balloon_guesser.services.locations import LocationResolver
from balloon_guesser.services.photos import PhotoProvider
from balloon_guesser.services.rounds import RoundAssembler
from balloon_guesser.services.weather import WeatherService

_MS_PER_HOUR = 60 * 60 * 1000


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    round_assembler: RoundAssembler
    weather_service: WeatherService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timeout = resolved_settings.http_timeout_seconds
    feed_client = HttpxBalloonFeedClient.create(
        resolved_settings.balloon_feed_base_url,
        timeout_seconds=resolved_settings.feed_timeout_seconds,
    )
    geocoding_client = HttpxNominatimClient.create(
        resolved_settings.nominatim_base_url,
        user_agent=resolved_settings.nominatim_user_agent,
        timeout_seconds=timeout,
    )
    photo_search_client = HttpxUnsplashClient.create(
        access_key=resolved_settings.unsplash_access_key,
        base_url=resolved_settings.unsplash_base_url,
        timeout_seconds=timeout,
    )
    weather_client = HttpxOpenMeteoClient.create(
        resolved_settings.open_meteo_base_url, timeout_seconds=timeout
    )
    photo_cache = JsonFilePhotoCacheStore.create(resolved_settings.photo_cache_path)
    round_assembler = RoundAssembler(
        feed_reader=BalloonFeedReader(feed_client),
        photo_cache=photo_cache,
        location_resolver=LocationResolver(geocoding_client),
        photo_provider=PhotoProvider(photo_search_client),
        cache_ttl_ms=resolved_settings.photo_cache_ttl_hours * _MS_PER_HOUR,
    )

    async def close_resources() -> None:
        await feed_client.close()
        await geocoding_client.close()
        await photo_search_client.close()
        await weather_client.close()

    return AppContainer(
        settings=resolved_settings,
        round_assembler=round_assembler,
        weather_service=WeatherService(weather_client),
        close_resources=close_resources,
    )
