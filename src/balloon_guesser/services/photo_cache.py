"""Photo cache abstractions."""

import time
from dataclasses import dataclass, field
from typing import Protocol

from balloon_guesser.domain.photos import CachedPhotoEntry

PHOTO_CACHE_TTL_MS = 24 * 60 * 60 * 1000
_MS_PER_HOUR = 60 * 60 * 1000


class PhotoCacheStore(Protocol):
    """Store of cached photo metadata keyed by balloon id."""

    def get(self, balloon_id: str) -> CachedPhotoEntry | None:
        """Return the stored entry, expired or not, if present."""

    def put(self, balloon_id: str, entry: CachedPhotoEntry) -> None:
        """Store an entry, replacing any previous one for the id."""


def current_epoch_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def is_fresh(
    entry: CachedPhotoEntry, now_ms: int, ttl_ms: int = PHOTO_CACHE_TTL_MS
) -> bool:
    """Return True while the entry is younger than the TTL."""
    return now_ms - entry.cached_at_ms < ttl_ms


def age_hours(entry: CachedPhotoEntry, now_ms: int) -> int:
    """Return the entry age rounded to whole hours."""
    return round((now_ms - entry.cached_at_ms) / _MS_PER_HOUR)


@dataclass
class InMemoryPhotoCacheStore(PhotoCacheStore):
    """Photo cache kept in process memory."""

    entries: dict[str, CachedPhotoEntry] = field(default_factory=dict)

    def get(self, balloon_id: str) -> CachedPhotoEntry | None:
        """Return the stored entry for a balloon id."""
        return self.entries.get(balloon_id)

    def put(self, balloon_id: str, entry: CachedPhotoEntry) -> None:
        """Store an entry for a balloon id."""
        self.entries[balloon_id] = entry
