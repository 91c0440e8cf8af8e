"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from mealie_card.adapters.mealie_client import MealieClient
from mealie_card.config import Settings, card_config
from mealie_card.containers import AppContainer
from mealie_card.services.ingredients import IngredientPresenter
from mealie_card.services.recipes import RecipeService

PANCAKES = {
    "id": "b1a9c0de-0000-4000-8000-000000000001",
    "slug": "pancakes",
    "name": "Pancakes",
    "description": "Fluffy weekend pancakes",
    "image": "abc",
    "prepTime": "PT10M",
    "performTime": "20",
    "totalTime": "PT30M",
    "recipeIngredient": [
        {
            "quantity": 2,
            "unit": {"name": "cup"},
            "food": {"name": "Flour"},
            "note": "sifted",
            "display": "2 cup Flour",
        },
        {
            "quantity": 1,
            "unit": "{'name': 'tablespoon', 'abbreviation': 'tbsp', 'fraction': True}",
            "food": {"name": "Oil"},
            "note": "",
            "display": "",
        },
        {"quantity": 0, "unit": None, "food": None, "note": "Salt to taste"},
    ],
}


@dataclass
class FakeMealieClient(MealieClient):
    """Fake Mealie client serving canned payloads."""

    recipes: dict[str, dict[str, object]] = field(
        default_factory=lambda: {"pancakes": PANCAKES}
    )
    meal_plan: list[dict[str, object]] = field(
        default_factory=lambda: [
            {"id": 1, "entryType": "breakfast", "recipe": PANCAKES},
            {"id": 2, "entryType": "dinner", "title": "Leftovers", "recipe": None},
        ]
    )
    recipe_calls: int = 0

    async def get_recipe(self, slug: str) -> dict[str, object]:
        self.recipe_calls += 1
        if slug not in self.recipes:
            request = httpx.Request("GET", f"https://mealie.test/api/recipes/{slug}")
            response = httpx.Response(404, request=request)
            raise httpx.HTTPStatusError(
                "Not Found", request=request, response=response
            )
        return self.recipes[slug]

    async def get_todays_meal_plan(self) -> list[dict[str, object]]:
        return self.meal_plan


@dataclass
class FailingMealieClient(MealieClient):
    """Mealie client whose requests never reach the server."""

    async def get_recipe(self, slug: str) -> dict[str, object]:
        raise httpx.ConnectError("connection refused")

    async def get_todays_meal_plan(self) -> list[dict[str, object]]:
        raise httpx.ConnectError("connection refused")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mealie_url="https://mealie.test/",
        mealie_api_token="mealie-token",
        card_title="Today's meals",
    )


@pytest.fixture
def mealie_client() -> FakeMealieClient:
    return FakeMealieClient()


@pytest.fixture
def container(settings: Settings, mealie_client: FakeMealieClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        card_config=card_config(settings),
        mealie_client=mealie_client,
        recipe_service=RecipeService(mealie_client),
        ingredient_presenter=IngredientPresenter(),
        close_resources=close_resources,
    )
