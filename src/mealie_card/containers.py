"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from mealie_card.adapters.mealie_client import HttpxMealieClient, MealieClient
from mealie_card.config import Settings, card_config
from mealie_card.domain.recipes import CardConfig
from mealie_card.services.ingredients import IngredientPresenter
from mealie_card.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    card_config: CardConfig
    mealie_client: MealieClient
    recipe_service: RecipeService
    ingredient_presenter: IngredientPresenter
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mealie_client = HttpxMealieClient.create(
        base_url=resolved_settings.mealie_url,
        api_token=resolved_settings.mealie_api_token,
    )
    recipe_service = RecipeService(
        client=mealie_client, debug=resolved_settings.debug_ingredients
    )
    ingredient_presenter = IngredientPresenter(
        debug=resolved_settings.debug_ingredients
    )

    async def close_resources() -> None:
        await mealie_client.close()

    return AppContainer(
        settings=resolved_settings,
        card_config=card_config(resolved_settings),
        mealie_client=mealie_client,
        recipe_service=recipe_service,
        ingredient_presenter=ingredient_presenter,
        close_resources=close_resources,
    )
