"""Location naming via reverse geocoding."""

import logging
from dataclasses import dataclass

import httpx

from balloon_guesser.adapters.nominatim_client import GeocodingClient
from balloon_guesser.domain.lookups import Lookup

UNKNOWN_LOCATION = "Unknown Location"

_NAME_FIELDS = ("city", "town", "state", "province", "country", "ocean", "sea")

_logger = logging.getLogger(__name__)


@dataclass
class LocationResolver:
    """Resolves coordinates to a coarse place name."""

    client: GeocodingClient

    async def resolve(self, lat: float, lon: float) -> Lookup[str]:
        """Return a place name, or a miss when the service knows no address."""
        try:
            payload = await self.client.reverse(lat, lon)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning(
                "Reverse geocoding failed for (%.2f, %.2f): %s", lat, lon, exc
            )
            return Lookup.error(f"reverse geocoding failed: {exc}")
        address = payload.get("address") if isinstance(payload, dict) else None
        if not isinstance(address, dict):
            return Lookup.miss("no address for coordinates")
        return Lookup.found(place_name_from_address(address))


def place_name_from_address(address: dict[str, object]) -> str:
    """Pick the most useful name from Nominatim address components."""
    for field_name in _NAME_FIELDS:
        value = address.get(field_name)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return UNKNOWN_LOCATION
