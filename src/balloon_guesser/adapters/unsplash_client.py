"""Unsplash photo search client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class PhotoSearchClient(Protocol):
    """Interface for searching photos by free text."""

    async def search_photos(
        self, query: str, per_page: int = 10, orientation: str = "landscape"
    ) -> dict[str, object]:
        """Search photos and return raw API data."""


@dataclass
class HttpxUnsplashClient(PhotoSearchClient):
    """HTTPX-backed Unsplash client."""

    access_key: str | None
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 5.0

    @classmethod
    def create(
        cls, access_key: str | None, base_url: str, timeout_seconds: float = 5.0
    ) -> "HttpxUnsplashClient":
        """Create an Unsplash client with a managed httpx session."""
        return cls(
            access_key=access_key,
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_photos(
        self, query: str, per_page: int = 10, orientation: str = "landscape"
    ) -> dict[str, object]:
        """Search Unsplash photos for a query."""
        if not self.access_key:
            raise RuntimeError("UNSPLASH_ACCESS_KEY is not configured")
        response = await self.http_client.get(
            f"{self.base_url}/search/photos",
            params={
                "query": query,
                "per_page": per_page,
                "orientation": orientation,
            },
            headers={"Authorization": f"Client-ID {self.access_key}"},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
