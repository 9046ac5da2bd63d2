"""Photo lookup for place names."""

import logging
import random
from dataclasses import dataclass, field

import httpx

from balloon_guesser.adapters.unsplash_client import PhotoSearchClient
from balloon_guesser.domain.lookups import Lookup
from balloon_guesser.domain.photos import PhotoResult

_logger = logging.getLogger(__name__)


@dataclass
class PhotoProvider:
    """Finds a representative landscape photo for a place."""

    client: PhotoSearchClient
    rng: random.Random = field(default_factory=random.Random)
    page_size: int = 10
    service_name: str = "Unsplash"

    async def find_photo(self, place_name: str) -> Lookup[PhotoResult]:
        """Return a random photo from the first page of search results."""
        try:
            payload = await self.client.search_photos(
                place_name, per_page=self.page_size, orientation="landscape"
            )
        except (httpx.HTTPError, ValueError, RuntimeError) as exc:
            _logger.warning("Photo search failed for %r: %s", place_name, exc)
            return Lookup.error(f"photo search failed: {exc}")
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list) or not results:
            _logger.info("No photos found for %r", place_name)
            return Lookup.miss(f"no photos for {place_name}")
        candidate = self.rng.choice(results)
        try:
            url = candidate["urls"]["regular"]
            photographer = candidate["user"]["name"]
        except (KeyError, TypeError):
            _logger.warning("Malformed photo result for %r", place_name)
            return Lookup.error("malformed photo result")
        if not (isinstance(url, str) and url and isinstance(photographer, str)):
            _logger.warning("Malformed photo result for %r", place_name)
            return Lookup.error("malformed photo result")
        return Lookup.found(
            PhotoResult(
                url=url,
                attribution=f"Photo by {photographer} on {self.service_name}",
            )
        )
