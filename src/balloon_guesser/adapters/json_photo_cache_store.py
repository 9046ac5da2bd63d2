"""Photo cache persisted as a single JSON document."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from balloon_guesser.domain.photos import CachedPhotoEntry
from balloon_guesser.services.photo_cache import PhotoCacheStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFilePhotoCacheStore(PhotoCacheStore):
    """File-backed photo cache.

    Every call reads (and ``put`` rewrites) the whole document. Concurrent
    writers are not coordinated: the last write wins. Persistence failures are
    logged and ignored, the cache is best effort.
    """

    path: Path

    @classmethod
    def create(cls, path: str | Path) -> "JsonFilePhotoCacheStore":
        """Create a store for the given file path."""
        return cls(path=Path(path))

    def get(self, balloon_id: str) -> CachedPhotoEntry | None:
        """Return the stored entry for a balloon id, if present."""
        return self.load().get(balloon_id)

    def put(self, balloon_id: str, entry: CachedPhotoEntry) -> None:
        """Store an entry and persist the whole mapping."""
        entries = self.load()
        entries[balloon_id] = entry
        self.save(entries)

    def load(self) -> dict[str, CachedPhotoEntry]:
        """Read every entry from disk; unreadable documents load as empty."""
        try:
            self._ensure_directory()
            if not self.path.exists():
                return {}
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.warning(
                "Failed to load photo cache from %s", self.path, exc_info=True
            )
            return {}
        if not isinstance(raw, dict):
            _logger.warning("Ignoring photo cache with unexpected shape: %s", self.path)
            return {}
        entries: dict[str, CachedPhotoEntry] = {}
        for key, record in raw.items():
            entry = _entry_from_record(record)
            if entry is None:
                _logger.warning("Skipping malformed photo cache record: %s", key)
                continue
            entries[str(key)] = entry
        return entries

    def save(self, entries: dict[str, CachedPhotoEntry]) -> None:
        """Write every entry to disk."""
        document = {key: _entry_to_record(entry) for key, entry in entries.items()}
        try:
            self._ensure_directory()
            self.path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError:
            _logger.warning(
                "Failed to save photo cache to %s", self.path, exc_info=True
            )

    def _ensure_directory(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)


def _entry_to_record(entry: CachedPhotoEntry) -> dict[str, object]:
    return {
        "balloonId": entry.balloon_id,
        "photoUrl": entry.photo_url,
        "photoAttribution": entry.photo_attribution,
        "locationName": entry.location_name,
        "timestamp": entry.cached_at_ms,
    }


def _entry_from_record(record: object) -> CachedPhotoEntry | None:
    if not isinstance(record, dict):
        return None
    timestamp = record.get("timestamp")
    photo_url = record.get("photoUrl")
    if isinstance(timestamp, bool) or not isinstance(timestamp, int | float):
        return None
    if not isinstance(photo_url, str) or not photo_url:
        return None
    return CachedPhotoEntry(
        balloon_id=str(record.get("balloonId", "")),
        photo_url=photo_url,
        photo_attribution=str(record.get("photoAttribution") or ""),
        location_name=str(record.get("locationName") or ""),
        cached_at_ms=int(timestamp),
    )
