"""Balloon feed reader over hourly snapshots."""

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import httpx

from balloon_guesser.adapters.balloon_feed_client import BalloonFeedClient
from balloon_guesser.domain.balloons import BalloonObservation

HOURS_IN_FEED = 24

_LAT_KEYS = ("lat", "latitude", "Lat", "Latitude")
_LON_KEYS = ("lon", "lng", "longitude", "Lon", "Lng", "Longitude")
_ALT_KEYS = ("alt", "altitude", "Alt", "Altitude")
_ID_KEYS = ("id", "ID", "balloon_id")

_logger = logging.getLogger(__name__)


@dataclass
class BalloonFeedReader:
    """Reads the first usable hourly snapshot from the balloon feed."""

    client: BalloonFeedClient
    hours: int = HOURS_IN_FEED

    async def fetch(self) -> list[BalloonObservation]:
        """Return observations from the earliest hour with valid data.

        Hours are tried in order 00, 01, ... Missing hours, transport errors
        and undecodable bodies move on to the next hour. Returns an empty list
        when no hour yields anything.
        """
        for hour in range(self.hours):
            hour_str = f"{hour:02d}"
            try:
                payload = await self.client.fetch_snapshot(hour_str)
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code == httpx.codes.NOT_FOUND:
                    _logger.info("Balloon snapshot %s.json not found", hour_str)
                else:
                    _logger.warning(
                        "Balloon snapshot %s.json failed with status %s",
                        hour_str,
                        exc.response.status_code,
                    )
                continue
            except (httpx.HTTPError, ValueError) as exc:
                _logger.warning(
                    "Error fetching balloon snapshot %s.json: %s", hour_str, exc
                )
                continue
            observations = parse_snapshot(payload)
            if observations:
                _logger.info(
                    "Fetched %s balloons from %s.json", len(observations), hour_str
                )
                return observations
            _logger.info("No valid balloon data in %s.json", hour_str)
        _logger.error("Balloon feed had no data for any hour")
        return []


def parse_snapshot(payload: object) -> list[BalloonObservation]:
    """Extract observations from a snapshot mapping or list."""
    items: Iterable[tuple[str, object]]
    if isinstance(payload, Mapping):
        items = ((str(key), value) for key, value in payload.items())
    elif isinstance(payload, list):
        items = ((str(index), value) for index, value in enumerate(payload))
    else:
        return []
    observations = []
    for fallback_id, item in items:
        observation = extract_observation(item, fallback_id)
        if observation is not None:
            observations.append(observation)
    return observations


def extract_observation(item: object, fallback_id: str) -> BalloonObservation | None:
    """Build an observation from a coordinate list or a coordinate object."""
    if isinstance(item, list | tuple):
        if len(item) < 2:  # noqa: PLR2004
            return None
        lat, lon = item[0], item[1]
        alt = item[2] if len(item) > 2 else None  # noqa: PLR2004
        if not _valid_position(lat, lon):
            return None
        return BalloonObservation(
            id=fallback_id,
            latitude=float(lat),
            longitude=float(lon),
            altitude=_altitude(alt),
        )
    if isinstance(item, Mapping):
        lat = _first_present(item, _LAT_KEYS)
        lon = _first_present(item, _LON_KEYS)
        if not _valid_position(lat, lon):
            return None
        alt = _first_present(item, _ALT_KEYS)
        balloon_id = _first_present(item, _ID_KEYS)
        return BalloonObservation(
            id=str(balloon_id) if balloon_id not in (None, "") else fallback_id,
            latitude=float(lat),
            longitude=float(lon),
            altitude=_altitude(alt),
        )
    return None


def _first_present(item: Mapping, keys: tuple[str, ...]) -> object:
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return None


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _altitude(value: object) -> float | None:
    if not _is_number(value):
        return None
    try:
        altitude = float(value)
    except OverflowError:
        return None
    return altitude if math.isfinite(altitude) else None


def _valid_position(lat: object, lon: object) -> bool:
    return (
        _is_number(lat)
        and _is_number(lon)
        and -90 <= lat <= 90  # noqa: PLR2004
        and -180 <= lon <= 180  # noqa: PLR2004
    )
