"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse

from mealie_card.api.models import (
    PresentedIngredient,
    PresentIngredientsRequest,
    PresentIngredientsResponse,
)
from mealie_card.app_logging import configure_logging
from mealie_card.containers import AppContainer
from mealie_card.domain.recipes import CardConfig
from mealie_card.services.cards import RecipeDetailCard, TodayMealPlanCard
from mealie_card.services.rendering import CardRenderer


def card_overrides(  # noqa: PLR0913
    clickable: bool | None = None,
    show_image: bool | None = None,
    show_description: bool | None = None,
    show_prep_time: bool | None = None,
    show_perform_time: bool | None = None,
    show_total_time: bool | None = None,
    show_ingredients: bool | None = None,
) -> dict[str, bool]:
    """Collect display flags passed as query parameters."""
    values = {
        "clickable": clickable,
        "show_image": show_image,
        "show_description": show_description,
        "show_prep_time": show_prep_time,
        "show_perform_time": show_perform_time,
        "show_total_time": show_total_time,
        "show_ingredients": show_ingredients,
    }
    return {key: value for key, value in values.items() if value is not None}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug_ingredients)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    def renderer_for(
        state_container: AppContainer, overrides: dict[str, bool]
    ) -> CardRenderer:
        config: CardConfig = replace(state_container.card_config, **overrides)
        return CardRenderer(
            config=config, presenter=state_container.ingredient_presenter
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/cards/today", response_class=HTMLResponse)
    async def today_card(
        request: Request, overrides: dict[str, bool] = Depends(card_overrides)
    ) -> HTMLResponse:
        """Render the card for today's meal plan."""
        state_container: AppContainer = request.app.state.container
        card = TodayMealPlanCard(
            recipe_service=state_container.recipe_service,
            renderer=renderer_for(state_container, overrides),
        )
        html = await card.render()
        if card.error:
            logger.info("Today card rendered in error state: %s", card.error)
        return HTMLResponse(html)

    @app.get("/cards/recipes/{slug}", response_class=HTMLResponse)
    async def recipe_card(
        slug: str,
        request: Request,
        overrides: dict[str, bool] = Depends(card_overrides),
    ) -> HTMLResponse:
        """Render the card for a single recipe."""
        state_container: AppContainer = request.app.state.container
        card = RecipeDetailCard(
            recipe_service=state_container.recipe_service,
            renderer=renderer_for(state_container, overrides),
            slug=slug,
        )
        html = await card.render()
        if card.error:
            logger.info("Recipe card %s rendered in error state: %s", slug, card.error)
        return HTMLResponse(html)

    @app.post("/ingredients/present")
    async def present_ingredients(
        payload: PresentIngredientsRequest, request: Request
    ) -> PresentIngredientsResponse:
        """Resolve raw ingredient payloads into presentation lines."""
        state_container: AppContainer = request.app.state.container
        records = state_container.ingredient_presenter.present(
            payload.ingredients, payload.show_ingredients
        )
        return PresentIngredientsResponse(
            items=[PresentedIngredient.from_record(record) for record in records]
        )

    return app
