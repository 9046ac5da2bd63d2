"""Game domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameRound:
    """One playable round: a balloon's true position and a photo of the place."""

    balloon_id: str
    balloon_lat: float
    balloon_lon: float
    photo_url: str
    photo_attribution: str
    location_name: str
    photo_lat: float
    photo_lon: float
    distance_km: int = 0


@dataclass(frozen=True)
class ScoreResult:
    """Score awarded for a single guess."""

    score: int
    distance_km: float


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions at a balloon's position."""

    temperature_c: float | None
    weather_code: int | None = None
