"""Tests for the photo provider."""

import asyncio
import random
from dataclasses import dataclass, field

import pytest

from balloon_guesser.adapters.unsplash_client import PhotoSearchClient
from balloon_guesser.domain.lookups import LookupStatus
from balloon_guesser.services.photos import PhotoProvider
from tests.conftest import FakePhotoSearchClient


@dataclass
class StaticPhotoSearchClient(PhotoSearchClient):
    payload: object
    calls: list[tuple[str, int, str]] = field(default_factory=list)

    async def search_photos(
        self, query: str, per_page: int = 10, orientation: str = "landscape"
    ) -> dict[str, object]:
        self.calls.append((query, per_page, orientation))
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload  # type: ignore[return-value]


def _result(name: str) -> dict[str, object]:
    return {"urls": {"regular": f"https://img.test/{name}"}, "user": {"name": name}}


def test_find_photo_formats_attribution() -> None:
    provider = PhotoProvider(FakePhotoSearchClient())

    result = asyncio.run(provider.find_photo("Reykjavik"))

    assert result.ok
    assert result.value is not None
    assert result.value.url == "https://images.test/reykjavik.jpg"
    assert result.value.attribution == "Photo by Ada Lovelace on Unsplash"


def test_find_photo_requests_landscape_page() -> None:
    client = StaticPhotoSearchClient(payload={"results": [_result("a")]})
    provider = PhotoProvider(client)

    asyncio.run(provider.find_photo("Oslo"))

    assert client.calls == [("Oslo", 10, "landscape")]


def test_find_photo_picks_from_results_with_rng() -> None:
    payload = {"results": [_result(name) for name in ("a", "b", "c", "d")]}
    provider = PhotoProvider(
        StaticPhotoSearchClient(payload=payload), rng=random.Random(7)
    )

    urls = {
        asyncio.run(provider.find_photo("Lima")).value.url  # type: ignore[union-attr]
        for _ in range(40)
    }

    assert len(urls) > 1
    assert urls <= {f"https://img.test/{name}" for name in ("a", "b", "c", "d")}


def test_find_photo_misses_on_empty_results() -> None:
    provider = PhotoProvider(FakePhotoSearchClient(empty=True))

    result = asyncio.run(provider.find_photo("Atlantis"))

    assert result.status is LookupStatus.MISS


def test_find_photo_reports_missing_credentials() -> None:
    client = StaticPhotoSearchClient(payload=RuntimeError("no key"))
    provider = PhotoProvider(client)

    result = asyncio.run(provider.find_photo("Quito"))

    assert result.status is LookupStatus.ERROR


def test_find_photo_reports_malformed_results() -> None:
    client = StaticPhotoSearchClient(payload={"results": [{"urls": {}}]})
    provider = PhotoProvider(client)

    result = asyncio.run(provider.find_photo("Quito"))

    assert result.status is LookupStatus.ERROR


@pytest.mark.parametrize(
    "candidate",
    [
        {"urls": {"regular": None}, "user": {"name": None}},
        {"urls": {"regular": ""}, "user": {"name": "Ada"}},
        {"urls": {"regular": "https://img.test/a"}, "user": {"name": 42}},
        {"urls": ["https://img.test/a"], "user": {"name": "Ada"}},
    ],
)
def test_find_photo_rejects_wrongly_typed_results(candidate) -> None:
    provider = PhotoProvider(StaticPhotoSearchClient(payload={"results": [candidate]}))

    result = asyncio.run(provider.find_photo("Quito"))

    assert result.status is LookupStatus.ERROR
    assert result.value is None
