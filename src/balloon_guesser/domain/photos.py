"""Photo domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhotoResult:
    """A representative photo picked for a place."""

    url: str
    attribution: str


@dataclass(frozen=True)
class CachedPhotoEntry:
    """Photo metadata remembered for a balloon id."""

    balloon_id: str
    photo_url: str
    photo_attribution: str
    location_name: str
    cached_at_ms: int
