"""Recipe lookups against the Mealie API."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from mealie_card.adapters.mealie_client import MealieClient
from mealie_card.domain.recipes import Recipe

_logger = logging.getLogger(__name__)


@dataclass
class RecipeService:
    """Service for fetching recipes shown on cards."""

    client: MealieClient
    debug: bool = False

    async def get_recipe(self, slug: str) -> Recipe:
        """Fetch a single recipe by slug."""
        payload = await self.client.get_recipe(slug)
        if not isinstance(payload, Mapping):
            raise RuntimeError("Mealie returned an unexpected recipe payload")
        recipe = recipe_from_payload(payload)
        if self.debug:
            _logger.info(
                "Recipe fetched: slug=%s ingredients=%s", slug, len(recipe.ingredients)
            )
        return recipe

    async def get_todays_recipes(self) -> list[Recipe]:
        """Return recipes planned for today, skipping note-only entries."""
        entries = await self.client.get_todays_meal_plan()
        recipes = [
            recipe_from_payload(entry["recipe"])
            for entry in entries
            if isinstance(entry, Mapping) and isinstance(entry.get("recipe"), Mapping)
        ]
        if self.debug:
            _logger.info(
                "Meal plan fetched: entries=%s recipes=%s", len(entries), len(recipes)
            )
        return recipes


def recipe_from_payload(payload: Mapping[str, object]) -> Recipe:
    """Map a Mealie recipe payload (camelCase or snake_case) to a Recipe."""
    ingredients = _first(
        payload, "recipeIngredient", "recipe_ingredient", "ingredients"
    )
    return Recipe(
        recipe_id=_optional_text(_first(payload, "id", "recipe_id")),
        slug=_optional_text(payload.get("slug")),
        name=_optional_text(payload.get("name")) or "",
        description=_optional_text(payload.get("description")),
        has_image=bool(payload.get("image")),
        prep_time=_optional_text(_first(payload, "prepTime", "prep_time")),
        perform_time=_optional_text(_first(payload, "performTime", "perform_time")),
        total_time=_optional_text(_first(payload, "totalTime", "total_time")),
        ingredients=tuple(ingredients) if isinstance(ingredients, list) else (),
    )


def _first(payload: Mapping[str, object], *keys: str) -> object | None:
    """Return the first non-None value among the given keys."""
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)
