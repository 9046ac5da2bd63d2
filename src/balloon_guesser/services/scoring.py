"""Guess scoring."""

import math

from balloon_guesser.domain.game import ScoreResult
from balloon_guesser.domain.geo import haversine_km

MAX_SCORE = 5000
PERFECT_RADIUS_KM = 500.0
DECAY_KM = 2500.0


def score_for_distance(distance_km: float) -> int:
    """Map a distance to points.

    Full marks inside the perfect radius, then an exponential decay with a
    2500 km scale: about 3352 points at 1500 km, 1839 at 3000 km, 249 at
    8000 km and about 2 near the antipode.
    """
    if distance_km <= PERFECT_RADIUS_KM:
        return MAX_SCORE
    score = round(MAX_SCORE * math.exp(-(distance_km - PERFECT_RADIUS_KM) / DECAY_KM))
    return max(0, score)


def calculate_score(
    actual_lat: float, actual_lon: float, guess_lat: float, guess_lon: float
) -> int:
    """Score a guess against the actual position."""
    return score_guess(actual_lat, actual_lon, guess_lat, guess_lon).score


def score_guess(
    actual_lat: float, actual_lon: float, guess_lat: float, guess_lon: float
) -> ScoreResult:
    """Score a guess and report the distance it was off by."""
    distance = haversine_km(actual_lat, actual_lon, guess_lat, guess_lon)
    return ScoreResult(score=score_for_distance(distance), distance_km=distance)
