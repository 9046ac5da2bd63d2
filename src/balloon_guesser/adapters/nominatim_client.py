"""Nominatim reverse-geocoding client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

# City/region granularity.
REVERSE_ZOOM = 5


class GeocodingClient(Protocol):
    """Interface for reverse geocoding coordinates."""

    async def reverse(self, lat: float, lon: float) -> dict[str, object]:
        """Return raw reverse-geocoding data for a coordinate pair."""


@dataclass
class HttpxNominatimClient(GeocodingClient):
    """HTTPX-backed Nominatim client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 5.0

    @classmethod
    def create(
        cls, base_url: str, user_agent: str, timeout_seconds: float = 5.0
    ) -> "HttpxNominatimClient":
        """Create a Nominatim client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            user_agent=user_agent,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def reverse(self, lat: float, lon: float) -> dict[str, object]:
        """Reverse geocode coordinates with address details."""
        response = await self.http_client.get(
            f"{self.base_url}/reverse",
            params={
                "lat": lat,
                "lon": lon,
                "format": "json",
                "zoom": REVERSE_ZOOM,
                "addressdetails": 1,
            },
            headers={"User-Agent": self.user_agent},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
