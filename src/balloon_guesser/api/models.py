"""Pydantic models for the game API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from balloon_guesser.domain.game import GameRound, WeatherSnapshot


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GameRoundPayload(_CamelModel):
    """A round as sent to the browser."""

    balloon_id: str
    balloon_lat: float
    balloon_lon: float
    photo_url: str
    photo_attribution: str
    location_name: str
    photo_lat: float
    photo_lon: float
    distance_km: int

    @classmethod
    def from_round(cls, game_round: GameRound) -> "GameRoundPayload":
        return cls(
            balloon_id=game_round.balloon_id,
            balloon_lat=game_round.balloon_lat,
            balloon_lon=game_round.balloon_lon,
            photo_url=game_round.photo_url,
            photo_attribution=game_round.photo_attribution,
            location_name=game_round.location_name,
            photo_lat=game_round.photo_lat,
            photo_lon=game_round.photo_lon,
            distance_km=game_round.distance_km,
        )


class GameStartResponse(_CamelModel):
    """Batch of rounds for a new game."""

    rounds: list[GameRoundPayload]


class GuessRequest(_CamelModel):
    """A player's guess for one round."""

    actual_lat: float = Field(ge=-90, le=90)
    actual_lon: float = Field(ge=-180, le=180)
    guess_lat: float = Field(ge=-90, le=90)
    guess_lon: float = Field(ge=-180, le=180)


class LocationPayload(BaseModel):
    """Coordinate pair."""

    lat: float
    lon: float


class WeatherPayload(_CamelModel):
    """Current conditions at the balloon."""

    temperature: float | None
    weather_code: int | None = None

    @classmethod
    def from_snapshot(cls, snapshot: WeatherSnapshot) -> "WeatherPayload":
        return cls(
            temperature=snapshot.temperature_c, weather_code=snapshot.weather_code
        )


class GuessResponse(_CamelModel):
    """Score for a guess with the revealed location."""

    score: int
    distance_km: float
    actual_location: LocationPayload
    weather: WeatherPayload | None = None
