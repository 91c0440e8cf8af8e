"""Domain models for recipes and card configuration."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Recipe:
    """Recipe fields used by the card."""

    recipe_id: str | None
    slug: str | None
    name: str
    description: str | None = None
    has_image: bool = False
    prep_time: str | None = None
    perform_time: str | None = None
    total_time: str | None = None
    ingredients: tuple[object, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CardConfig:
    """Display options for a recipe card."""

    url: str
    group: str = "home"
    title: str = ""
    language: str = "en"
    clickable: bool = True
    show_image: bool = True
    show_description: bool = True
    show_prep_time: bool = True
    show_perform_time: bool = True
    show_total_time: bool = True
    show_ingredients: bool = True
