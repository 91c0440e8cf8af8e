"""HTML rendering for recipe cards."""

from dataclasses import dataclass, field
from html import escape

from mealie_card.domain.ingredients import PresentationRecord
from mealie_card.domain.recipes import CardConfig, Recipe
from mealie_card.services.formatting import format_time, recipe_image_url, recipe_url
from mealie_card.services.ingredients import IngredientPresenter
from mealie_card.services.translate import localize

_PLACEHOLDER_STYLE = "opacity:0.5; font-style:italic"


@dataclass
class CardRenderer:
    """Renders card states and recipe blocks as HTML fragments."""

    config: CardConfig
    presenter: IngredientPresenter = field(default_factory=IngredientPresenter)

    def render_loading(self, title: str) -> str:
        """Render the loading state."""
        label = escape(self._t("editor.loading") or "Loading...")
        return self._card(
            title, f'<div class="loading"><div class="loading-text">{label}</div></div>'
        )

    def render_error(self, title: str, error: str) -> str:
        """Render the error state."""
        return self._card(
            title,
            f'<div class="error"><div class="error-text">{escape(error)}</div></div>',
        )

    def render_empty_state(self, title: str, message: str) -> str:
        """Render the empty state."""
        return self._card(
            title,
            '<div class="no-meals">'
            f'<div class="no-meals-text">{escape(message)}</div></div>',
        )

    def render_header(self, title: str) -> str:
        """Render the card header."""
        return (
            '<div class="header"><div class="title-container">'
            f'<div class="title">{escape(title)}</div></div></div>'
        )

    def render_card(self, title: str, recipes: list[Recipe]) -> str:
        """Render a card with one block per recipe."""
        body = "".join(self.render_recipe(recipe) for recipe in recipes)
        return self._card(title, f'<div class="recipes">{body}</div>')

    def render_recipe(self, recipe: Recipe) -> str:
        """Render a full recipe block honouring the card's display flags."""
        config = self.config
        info = "".join(
            [
                self.render_recipe_name(recipe, config.clickable),
                self.render_recipe_description(
                    recipe.description or "", config.show_description
                ),
                self.render_recipe_times(
                    recipe,
                    config.show_prep_time,
                    config.show_perform_time,
                    config.show_total_time,
                ),
                self.render_recipe_ingredients(
                    list(recipe.ingredients), config.show_ingredients
                ),
            ]
        )
        image = self.render_recipe_image(
            recipe, config.clickable, config.show_image, config.group
        )
        return (
            f'<div class="recipe">{image}'
            f'<div class="recipe-info">{info}</div></div>'
        )

    def render_recipe_image(
        self, recipe: Recipe, clickable: bool, show_image: bool, group: str
    ) -> str:
        """Render the recipe image, linked to the recipe when clickable."""
        if not show_image:
            return ""
        image_url = recipe_image_url(
            self.config.url, recipe.recipe_id, recipe.has_image
        )
        if image_url is None:
            return ""
        image = (
            '<div class="recipe-image-container">'
            f'<img src="{escape(image_url)}" alt="{escape(recipe.name)}" '
            'class="recipe-image" loading="lazy" '
            'onerror="this.parentElement.remove()" /></div>'
        )
        link = recipe_url(self.config.url, recipe.slug, clickable, group)
        return self._link(link, image, "recipe-image-link")

    def render_recipe_name(self, recipe: Recipe, clickable: bool) -> str:
        """Render the recipe name, linked to the recipe when clickable."""
        link = recipe_url(self.config.url, recipe.slug, clickable, self.config.group)
        name = f'<h3 class="recipe-name">{escape(recipe.name)}</h3>'
        return self._link(link, name, "recipe-name-link")

    def render_recipe_description(self, description: str, show: bool) -> str:
        if not show or not description:
            return ""
        return f'<p class="recipe-description">{escape(description)}</p>'

    def render_recipe_times(
        self,
        recipe: Recipe,
        show_prep_time: bool,
        show_perform_time: bool,
        show_total_time: bool,
    ) -> str:
        """Render time badges for the enabled, populated durations."""
        badges = [
            self.render_time_badge(icon, format_time(value))
            for icon, value, enabled in (
                ("⏱️", recipe.prep_time, show_prep_time),
                ("🔥", recipe.perform_time, show_perform_time),
                ("⏰", recipe.total_time, show_total_time),
            )
            if enabled and value
        ]
        if not badges:
            return ""
        return f'<div class="recipe-times">{"".join(badges)}</div>'

    def render_time_badge(self, icon: str, label: str) -> str:
        return (
            f'<span class="time-badge"><span class="time-icon">{icon}</span>'
            f'<span class="time-value">{escape(label)}</span></span>'
        )

    def render_recipe_ingredients(
        self, ingredients: list[object] | None, show_ingredients: bool
    ) -> str:
        """Render the ingredient list, or nothing when hidden or empty."""
        records = self.presenter.present(ingredients, show_ingredients)
        if not records:
            return ""
        heading = escape(self._t("common.ingredients") or "Ingredients")
        items = "".join(_render_ingredient(record) for record in records)
        return (
            f'<div class="recipe-ingredients"><h4>{heading}</h4>'
            f"<ul>{items}</ul></div>"
        )

    def _card(self, title: str, body: str) -> str:
        header = self.render_header(title) if title else ""
        return f"<ha-card>{header}{body}</ha-card>"

    def _t(self, key: str) -> str | None:
        return localize(key, self.config.language)

    @staticmethod
    def _link(url: str, content: str, css_class: str) -> str:
        if url == "#":
            return content
        return (
            f'<a href="{escape(url)}" target="_blank" rel="noopener noreferrer" '
            f'class="{css_class}">{content}</a>'
        )


def _render_ingredient(record: PresentationRecord) -> str:
    """Render one list item: quantity, name, then note."""
    parts: list[str] = []
    if record.quantity_line is not None:
        parts.append(
            f'<span class="ingredient-quantity">{escape(record.quantity_line)}</span>'
        )
    style = f' style="{_PLACEHOLDER_STYLE}"' if record.is_placeholder else ""
    parts.append(
        f'<span class="ingredient-name"{style}>{escape(record.name_segment)}</span>'
    )
    if record.note_segment is not None:
        parts.append(
            f'<span class="ingredient-note">({escape(record.note_segment)})</span>'
        )
    return f"<li>{' '.join(parts)}</li>"
