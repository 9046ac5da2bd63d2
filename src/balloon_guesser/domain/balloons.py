"""Domain models for balloon telemetry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BalloonObservation:
    """A single balloon position taken from an hourly feed snapshot."""

    id: str
    latitude: float
    longitude: float
    altitude: float | None = None
