"""Game round assembly."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from balloon_guesser.domain.balloons import BalloonObservation
from balloon_guesser.domain.game import GameRound
from balloon_guesser.domain.lookups import Lookup
from balloon_guesser.domain.photos import CachedPhotoEntry
from balloon_guesser.services.balloon_feed import BalloonFeedReader
from balloon_guesser.services.locations import LocationResolver
from balloon_guesser.services.photo_cache import (
    PHOTO_CACHE_TTL_MS,
    PhotoCacheStore,
    age_hours,
    current_epoch_millis,
    is_fresh,
)
from balloon_guesser.services.photos import PhotoProvider
from balloon_guesser.services.shuffle import secure_shuffle

_logger = logging.getLogger(__name__)


class RoundAssemblyError(RuntimeError):
    """Base error for rounds that cannot be built."""


class NoDataError(RoundAssemblyError):
    """The balloon feed returned no observations."""


class NoPhotosError(RoundAssemblyError):
    """No candidate balloon produced a playable round."""


@dataclass
class RoundAssembler:
    """Builds playable rounds from live balloons.

    Candidates are processed one at a time so cache reads and writes never
    interleave within a batch.
    """

    feed_reader: BalloonFeedReader
    photo_cache: PhotoCacheStore
    location_resolver: LocationResolver
    photo_provider: PhotoProvider
    cache_ttl_ms: int = PHOTO_CACHE_TTL_MS
    oversample_factor: int = 3
    shuffle: Callable[[Sequence[BalloonObservation]], list[BalloonObservation]] = (
        secure_shuffle
    )
    clock: Callable[[], int] = current_epoch_millis

    async def assemble(self, count: int) -> list[GameRound]:
        """Return up to ``count`` rounds in the order they were produced."""
        if count < 1:
            raise ValueError("count must be at least 1")
        observations = await self.feed_reader.fetch()
        if not observations:
            raise NoDataError("No balloon data available: feed unavailable")

        candidates = self.shuffle(observations)[: count * self.oversample_factor]
        _logger.info(
            "Creating %s rounds from %s candidates (%s balloons)",
            count,
            len(candidates),
            len(observations),
        )
        rounds: list[GameRound] = []
        for observation in candidates:
            if len(rounds) >= count:
                break
            outcome = await self.build_round(observation)
            if outcome.ok and outcome.value is not None:
                rounds.append(outcome.value)
                _logger.info("Round %s/%s created", len(rounds), count)
            else:
                _logger.info(
                    "Skipping balloon %s (%s): %s",
                    observation.id,
                    outcome.status,
                    outcome.reason,
                )
        if not rounds:
            raise NoPhotosError("Could not find any photos for the selected balloons")
        return rounds

    async def build_round(self, observation: BalloonObservation) -> Lookup[GameRound]:
        """Build one round, preferring a fresh cached photo."""
        now_ms = self.clock()
        cached = self.photo_cache.get(observation.id)
        if cached is not None:
            if is_fresh(cached, now_ms, self.cache_ttl_ms):
                _logger.info(
                    "Using cached photo for %s (cached %sh ago)",
                    cached.location_name,
                    age_hours(cached, now_ms),
                )
                return Lookup.found(_round_from_entry(observation, cached))
            _logger.info(
                "Cache expired for %s (%sh old)",
                cached.location_name,
                age_hours(cached, now_ms),
            )

        location = await self.location_resolver.resolve(
            observation.latitude, observation.longitude
        )
        if not location.ok or location.value is None:
            return Lookup(status=location.status, reason=location.reason)
        photo = await self.photo_provider.find_photo(location.value)
        if not photo.ok or photo.value is None:
            return Lookup(status=photo.status, reason=photo.reason)

        entry = CachedPhotoEntry(
            balloon_id=observation.id,
            photo_url=photo.value.url,
            photo_attribution=photo.value.attribution,
            location_name=location.value,
            cached_at_ms=now_ms,
        )
        self.photo_cache.put(observation.id, entry)
        return Lookup.found(_round_from_entry(observation, entry))


def _round_from_entry(
    observation: BalloonObservation, entry: CachedPhotoEntry
) -> GameRound:
    # The photo is looked up for the balloon's own position.
    return GameRound(
        balloon_id=observation.id,
        balloon_lat=observation.latitude,
        balloon_lon=observation.longitude,
        photo_url=entry.photo_url,
        photo_attribution=entry.photo_attribution,
        location_name=entry.location_name,
        photo_lat=observation.latitude,
        photo_lon=observation.longitude,
        distance_km=0,
    )
