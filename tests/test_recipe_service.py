"""Tests for recipe service."""

import asyncio

import httpx
import pytest

from mealie_card.services.recipes import RecipeService, recipe_from_payload
from tests.conftest import FakeMealieClient


def test_get_recipe_maps_camel_case_payload() -> None:
    service = RecipeService(FakeMealieClient())

    recipe = asyncio.run(service.get_recipe("pancakes"))

    assert recipe.name == "Pancakes"
    assert recipe.slug == "pancakes"
    assert recipe.has_image
    assert recipe.prep_time == "PT10M"
    assert recipe.perform_time == "20"
    assert len(recipe.ingredients) == 3


def test_recipe_from_snake_case_payload() -> None:
    recipe = recipe_from_payload(
        {
            "recipe_id": 42,
            "slug": "soup",
            "name": "Soup",
            "image": None,
            "prep_time": "15",
            "ingredients": [{"note": "Water"}],
        }
    )

    assert recipe.recipe_id == "42"
    assert not recipe.has_image
    assert recipe.prep_time == "15"
    assert recipe.ingredients == ({"note": "Water"},)


def test_recipe_from_payload_tolerates_missing_fields() -> None:
    recipe = recipe_from_payload({"recipeIngredient": "not-a-list"})

    assert recipe.name == ""
    assert recipe.recipe_id is None
    assert recipe.ingredients == ()


def test_todays_recipes_skip_note_entries() -> None:
    service = RecipeService(FakeMealieClient())

    recipes = asyncio.run(service.get_todays_recipes())

    assert [recipe.slug for recipe in recipes] == ["pancakes"]


def test_get_recipe_propagates_http_errors() -> None:
    service = RecipeService(FakeMealieClient())

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(service.get_recipe("missing"))


def test_get_recipe_rejects_unexpected_payload() -> None:
    service = RecipeService(FakeMealieClient(recipes={"odd": ["not", "a", "recipe"]}))

    with pytest.raises(RuntimeError):
        asyncio.run(service.get_recipe("odd"))
