"""Open-Meteo current weather client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

CURRENT_FIELDS = "temperature_2m,weather_code"


class WeatherClient(Protocol):
    """Interface for current weather lookups."""

    async def current_weather(self, lat: float, lon: float) -> dict[str, object]:
        """Return raw current-weather data for a coordinate pair."""


@dataclass
class HttpxOpenMeteoClient(WeatherClient):
    """HTTPX-backed Open-Meteo client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 5.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 5.0
    ) -> "HttpxOpenMeteoClient":
        """Create an Open-Meteo client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def current_weather(self, lat: float, lon: float) -> dict[str, object]:
        """Fetch current conditions from the forecast endpoint."""
        response = await self.http_client.get(
            f"{self.base_url}/forecast",
            params={
                "latitude": lat,
                "longitude": lon,
                "current": CURRENT_FIELDS,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
