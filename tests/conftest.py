"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from balloon_guesser.adapters.balloon_feed_client import BalloonFeedClient
from balloon_guesser.adapters.nominatim_client import GeocodingClient
from balloon_guesser.adapters.open_meteo_client import WeatherClient
from balloon_guesser.adapters.unsplash_client import PhotoSearchClient
from balloon_guesser.config import Settings
from balloon_guesser.containers import AppContainer
from balloon_guesser.services.balloon_feed import BalloonFeedReader
from balloon_guesser.services.locations import LocationResolver
from balloon_guesser.services.photo_cache import InMemoryPhotoCacheStore
from balloon_guesser.services.photos import PhotoProvider
from balloon_guesser.services.rounds import RoundAssembler
from balloon_guesser.services.weather import WeatherService

NOW_MS = 1_750_000_000_000


def not_found(hour: str) -> httpx.HTTPStatusError:
    """Build the error httpx raises for a missing hourly snapshot."""
    request = httpx.Request("GET", f"https://feed.test/{hour}.json")
    response = httpx.Response(404, request=request)
    return httpx.HTTPStatusError("Not Found", request=request, response=response)


@dataclass
class FakeBalloonFeedClient(BalloonFeedClient):
    """Feed client serving canned snapshots per hour; other hours are 404."""

    snapshots: dict[str, object] = field(default_factory=dict)
    requested: list[str] = field(default_factory=list)

    async def fetch_snapshot(self, hour: str) -> object:
        self.requested.append(hour)
        if hour not in self.snapshots:
            raise not_found(hour)
        snapshot = self.snapshots[hour]
        if isinstance(snapshot, Exception):
            raise snapshot
        return snapshot


@dataclass
class FakeGeocodingClient(GeocodingClient):
    """Geocoder answering from a table keyed by (lat, lon)."""

    addresses: dict[tuple[float, float], dict[str, object]] = field(
        default_factory=dict
    )
    default: dict[str, object] | None = None
    calls: list[tuple[float, float]] = field(default_factory=list)

    async def reverse(self, lat: float, lon: float) -> dict[str, object]:
        self.calls.append((lat, lon))
        address = self.addresses.get((lat, lon), self.default)
        if address is None:
            return {"error": "Unable to geocode"}
        return {"address": address}


@dataclass
class FakePhotoSearchClient(PhotoSearchClient):
    """Photo search returning one predictable result per query."""

    empty: bool = False
    results_override: list[object] | None = None
    queries: list[str] = field(default_factory=list)

    async def search_photos(
        self, query: str, per_page: int = 10, orientation: str = "landscape"
    ) -> dict[str, object]:
        self.queries.append(query)
        if self.empty:
            return {"total": 0, "results": []}
        if self.results_override is not None:
            return {"total": 1, "results": self.results_override}
        slug = query.lower().replace(" ", "-")
        return {
            "total": 1,
            "results": [
                {
                    "urls": {"regular": f"https://images.test/{slug}.jpg"},
                    "user": {"name": "Ada Lovelace"},
                }
            ],
        }


@dataclass
class FakeWeatherClient(WeatherClient):
    """Weather client returning fixed current conditions."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "current": {"temperature_2m": 12.5, "weather_code": 3}
        }
    )

    async def current_weather(self, lat: float, lon: float) -> dict[str, object]:
        return self.payload


def identity_shuffle(items):  # type: ignore[no-untyped-def]
    return list(items)


def build_assembler(
    feed_client: FakeBalloonFeedClient,
    geocoding_client: FakeGeocodingClient,
    photo_client: FakePhotoSearchClient,
    cache: InMemoryPhotoCacheStore | None = None,
) -> RoundAssembler:
    """Wire a round assembler over fakes with a fixed clock."""
    return RoundAssembler(
        feed_reader=BalloonFeedReader(feed_client),
        photo_cache=cache if cache is not None else InMemoryPhotoCacheStore(),
        location_resolver=LocationResolver(geocoding_client),
        photo_provider=PhotoProvider(photo_client),
        shuffle=identity_shuffle,
        clock=lambda: NOW_MS,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        unsplash_access_key="unsplash-key",
        photo_cache_path="cache/test-photos.json",
    )


@pytest.fixture
def feed_client() -> FakeBalloonFeedClient:
    return FakeBalloonFeedClient(
        snapshots={
            "00": {
                "0": [48.85, 2.35, 12000.0],
                "1": [35.68, 139.69, 15000.0],
                "2": [-33.87, 151.21, 9000.0],
            }
        }
    )


@pytest.fixture
def geocoding_client() -> FakeGeocodingClient:
    return FakeGeocodingClient(
        addresses={
            (48.85, 2.35): {"city": "Paris", "country": "France"},
            (35.68, 139.69): {"city": "Tokyo", "country": "Japan"},
            (-33.87, 151.21): {"city": "Sydney", "country": "Australia"},
        }
    )


@pytest.fixture
def photo_client() -> FakePhotoSearchClient:
    return FakePhotoSearchClient()


@pytest.fixture
def photo_cache() -> InMemoryPhotoCacheStore:
    return InMemoryPhotoCacheStore()


@pytest.fixture
def container(
    settings: Settings,
    feed_client: FakeBalloonFeedClient,
    geocoding_client: FakeGeocodingClient,
    photo_client: FakePhotoSearchClient,
    photo_cache: InMemoryPhotoCacheStore,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        round_assembler=build_assembler(
            feed_client, geocoding_client, photo_client, photo_cache
        ),
        weather_service=WeatherService(FakeWeatherClient()),
        close_resources=close_resources,
    )
