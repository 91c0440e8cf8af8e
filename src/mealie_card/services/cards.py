"""Card lifecycle: load recipes once, then render the matching state."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx

from mealie_card.domain.recipes import Recipe
from mealie_card.services.recipes import RecipeService
from mealie_card.services.rendering import CardRenderer
from mealie_card.services.translate import localize

_logger = logging.getLogger(__name__)


@dataclass
class MealieCard(ABC):
    """Base card holding load state and recipes."""

    recipe_service: RecipeService
    renderer: CardRenderer
    error: str | None = None
    loading: bool = False
    initialized: bool = False
    recipes: list[Recipe] = field(default_factory=list)

    @abstractmethod
    async def fetch(self) -> list[Recipe]:
        """Fetch the recipes shown on this card."""

    @abstractmethod
    def empty_message(self) -> str:
        """Message shown when there is nothing to display."""

    @property
    def title(self) -> str:
        return self.renderer.config.title

    async def ensure_loaded(self) -> None:
        """Load data once; later calls are no-ops."""
        if self.initialized or self.loading:
            return
        await self.load_data()

    async def load_data(self) -> None:
        """Fetch recipes, recording failures as the card's error state."""
        self.loading = True
        self.error = None
        try:
            self.recipes = await self.fetch()
        except httpx.HTTPStatusError as exc:
            _logger.warning(
                "Mealie request failed (status=%s): %s",
                exc.response.status_code,
                exc.request.url,
            )
            self.error = self._error_message(exc.response.status_code)
        except (httpx.HTTPError, RuntimeError, ValueError):
            _logger.exception("Failed to load recipes from Mealie")
            self.error = self._error_message(None)
        finally:
            self.loading = False
            self.initialized = True

    async def render(self) -> str:
        """Load if needed and render the current state."""
        await self.ensure_loaded()
        if self.loading:
            return self.renderer.render_loading(self.title)
        if self.error:
            return self.renderer.render_error(self.title, self.error)
        if not self.recipes:
            return self.renderer.render_empty_state(self.title, self.empty_message())
        return self.renderer.render_card(self.title, self.recipes)

    def _localize(self, key: str, fallback: str) -> str:
        return localize(key, self.renderer.config.language) or fallback

    def _error_message(self, status_code: int | None) -> str:
        if status_code == 404:
            return self._localize("error.not_found", "Recipe not found")
        return self._localize("error.fetch_failed", "Could not load data from Mealie")


@dataclass
class TodayMealPlanCard(MealieCard):
    """Card listing the recipes planned for today."""

    async def fetch(self) -> list[Recipe]:
        return await self.recipe_service.get_todays_recipes()

    def empty_message(self) -> str:
        return self._localize("common.no_meals_today", "No meals planned for today")


@dataclass
class RecipeDetailCard(MealieCard):
    """Card showing a single recipe."""

    slug: str = ""

    async def fetch(self) -> list[Recipe]:
        return [await self.recipe_service.get_recipe(self.slug)]

    def empty_message(self) -> str:
        return self._localize("common.no_recipe", "No recipe found")
