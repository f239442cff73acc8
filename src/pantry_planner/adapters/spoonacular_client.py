"""Spoonacular recipe API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SpoonacularClient(Protocol):
    """Interface for Spoonacular API interactions."""

    async def search_by_ingredients(
        self, ingredients: list[str], number: int
    ) -> dict[str, object]:
        """Search recipes that use the given ingredients and return raw API data."""


@dataclass
class HttpxSpoonacularClient(SpoonacularClient):
    """HTTPX-backed Spoonacular client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15
    ) -> "HttpxSpoonacularClient":
        """Create a Spoonacular client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_by_ingredients(
        self, ingredients: list[str], number: int
    ) -> dict[str, object]:
        """Search recipes ranked by how many of the ingredients they use."""
        url = f"{self.base_url}/recipes/complexSearch"
        response = await self.http_client.get(
            url,
            params={
                "apiKey": self.api_key,
                "includeIngredients": ",".join(ingredients),
                "addRecipeInformation": True,
                "fillIngredients": True,
                "instructionsRequired": True,
                "sort": "max-used-ingredients",
                "number": number,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
