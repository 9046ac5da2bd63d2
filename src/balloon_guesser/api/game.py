"""Game API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from balloon_guesser.api.models import (
    GameRoundPayload,
    GameStartResponse,
    GuessRequest,
    GuessResponse,
    LocationPayload,
    WeatherPayload,
)
from balloon_guesser.services.rounds import NoDataError, NoPhotosError
from balloon_guesser.services.scoring import score_guess

if TYPE_CHECKING:
    from balloon_guesser.containers import AppContainer

router = APIRouter(prefix="/api/game", tags=["game"])

_logger = logging.getLogger(__name__)


@router.get("/start", response_model=GameStartResponse)
async def start_game(request: Request) -> GameStartResponse:
    """Build a fresh batch of rounds."""
    container: AppContainer = request.app.state.container
    try:
        rounds = await container.round_assembler.assemble(
            container.settings.rounds_per_game
        )
    except NoDataError as exc:
        _logger.error("Failed to start game: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    except NoPhotosError as exc:
        _logger.error("Failed to start game: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc
    return GameStartResponse(
        rounds=[GameRoundPayload.from_round(game_round) for game_round in rounds]
    )


@router.post("/guess", response_model=GuessResponse)
async def submit_guess(guess: GuessRequest, request: Request) -> GuessResponse:
    """Score a guess and reveal the balloon's position."""
    container: AppContainer = request.app.state.container
    result = score_guess(
        guess.actual_lat, guess.actual_lon, guess.guess_lat, guess.guess_lon
    )
    snapshot = await container.weather_service.current(
        guess.actual_lat, guess.actual_lon
    )
    return GuessResponse(
        score=result.score,
        distance_km=round(result.distance_km, 1),
        actual_location=LocationPayload(lat=guess.actual_lat, lon=guess.actual_lon),
        weather=WeatherPayload.from_snapshot(snapshot) if snapshot else None,
    )
