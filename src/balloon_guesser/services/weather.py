"""Current weather at a balloon position."""

import logging
from dataclasses import dataclass

import httpx

from balloon_guesser.adapters.open_meteo_client import WeatherClient
from balloon_guesser.domain.game import WeatherSnapshot

_logger = logging.getLogger(__name__)


@dataclass
class WeatherService:
    """Looks up current conditions; failures yield no data."""

    client: WeatherClient

    async def current(self, lat: float, lon: float) -> WeatherSnapshot | None:
        """Return current temperature and weather code, if available."""
        try:
            payload = await self.client.current_weather(lat, lon)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Weather lookup failed for (%.2f, %.2f): %s", lat, lon, exc)
            return None
        current = payload.get("current") if isinstance(payload, dict) else None
        if not isinstance(current, dict):
            return None
        temperature = current.get("temperature_2m")
        code = current.get("weather_code")
        return WeatherSnapshot(
            temperature_c=float(temperature) if _is_number(temperature) else None,
            weather_code=int(code) if _is_number(code) else None,
        )


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
