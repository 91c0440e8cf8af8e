"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from mealie_card.domain.recipes import CardConfig

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    mealie_url: str
    mealie_api_token: str
    mealie_group: str = "home"
    card_title: str = ""
    language: str = "en"
    clickable: bool = True
    show_image: bool = True
    show_description: bool = True
    show_prep_time: bool = True
    show_perform_time: bool = True
    show_total_time: bool = True
    show_ingredients: bool = True
    debug_ingredients: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def card_config(settings: Settings) -> CardConfig:
    """Build the default card display options from settings."""
    return CardConfig(
        url=settings.mealie_url.rstrip("/"),
        group=settings.mealie_group,
        title=settings.card_title,
        language=settings.language,
        clickable=settings.clickable,
        show_image=settings.show_image,
        show_description=settings.show_description,
        show_prep_time=settings.show_prep_time,
        show_perform_time=settings.show_perform_time,
        show_total_time=settings.show_total_time,
        show_ingredients=settings.show_ingredients,
    )
