"""WindBorne hourly balloon snapshot client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class BalloonFeedClient(Protocol):
    """Interface for fetching hourly balloon snapshots."""

    async def fetch_snapshot(self, hour: str) -> object:
        """Return the decoded JSON snapshot for a two-digit hour."""


@dataclass
class HttpxBalloonFeedClient(BalloonFeedClient):
    """HTTPX-backed balloon feed client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxBalloonFeedClient":
        """Create a feed client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_snapshot(self, hour: str) -> object:
        """Fetch one hourly snapshot, e.g. ``03.json``."""
        response = await self.http_client.get(
            f"{self.base_url}/{hour}.json", timeout=self.timeout_seconds
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
