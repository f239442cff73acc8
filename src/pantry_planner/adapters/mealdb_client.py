"""TheMealDB API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MealDbClient(Protocol):
    """Interface for TheMealDB API interactions."""

    async def filter_by_ingredient(self, ingredient: str) -> dict[str, object]:
        """Return raw meal summaries that use an ingredient."""

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Return raw full details for a meal id."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 8

    @classmethod
    def create(cls, base_url: str, timeout_seconds: float = 8) -> "HttpxMealDbClient":
        """Create a TheMealDB client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def filter_by_ingredient(self, ingredient: str) -> dict[str, object]:
        """Filter meals by main ingredient."""
        return await self._get("filter.php", {"i": ingredient})

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Look up a meal by id."""
        return await self._get("lookup.php", {"i": meal_id})

    async def _get(self, path: str, params: dict[str, str]) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}/{path}",
            params=params,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
