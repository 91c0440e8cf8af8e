"""Mealie recipe service API client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class MealieClient(Protocol):
    """Interface for Mealie API interactions."""

    async def get_recipe(self, slug: str) -> dict[str, object]:
        """Fetch a recipe by slug and return raw API data."""

    async def get_todays_meal_plan(self) -> list[dict[str, object]]:
        """Return today's meal plan entries as raw API data."""


@dataclass
class HttpxMealieClient(MealieClient):
    """HTTPX-backed Mealie client."""

    base_url: str
    api_token: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, api_token: str) -> "HttpxMealieClient":
        """Create a Mealie client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            api_token=api_token,
            http_client=httpx.AsyncClient(),
        )

    async def get_recipe(self, slug: str) -> dict[str, object]:
        """Fetch a recipe by slug."""
        response = await self.http_client.get(
            f"{self.base_url}/api/recipes/{quote(slug, safe='')}",
            headers=self._headers(),
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_todays_meal_plan(self) -> list[dict[str, object]]:
        """Fetch today's meal plan entries."""
        response = await self.http_client.get(
            f"{self.base_url}/api/households/mealplans/today",
            headers=self._headers(),
            timeout=15,
        )
        response.raise_for_status()
        payload = response.json()
        if isinstance(payload, dict):
            items = payload.get("items", [])
            return items if isinstance(items, list) else []
        return payload if isinstance(payload, list) else []

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Accept": "application/json",
        }
