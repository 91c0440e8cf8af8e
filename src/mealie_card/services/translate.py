"""Localized card strings keyed by dotted paths."""

_DEFAULT_LANGUAGE = "en"

_TRANSLATIONS: dict[str, dict[str, object]] = {
    "en": {
        "common": {
            "ingredients": "Ingredients",
            "no_recipe": "No recipe found",
            "no_meals_today": "No meals planned for today",
        },
        "editor": {"loading": "Loading..."},
        "error": {
            "fetch_failed": "Could not load data from Mealie",
            "not_found": "Recipe not found",
        },
    },
    "fr": {
        "common": {
            "ingredients": "Ingrédients",
            "no_recipe": "Aucune recette trouvée",
            "no_meals_today": "Aucun repas prévu aujourd'hui",
        },
        "editor": {"loading": "Chargement..."},
        "error": {
            "fetch_failed": "Impossible de charger les données de Mealie",
            "not_found": "Recette introuvable",
        },
    },
    "de": {
        "common": {
            "ingredients": "Zutaten",
            "no_recipe": "Kein Rezept gefunden",
            "no_meals_today": "Heute sind keine Mahlzeiten geplant",
        },
        "editor": {"loading": "Wird geladen..."},
        "error": {
            "fetch_failed": "Daten konnten nicht von Mealie geladen werden",
            "not_found": "Rezept nicht gefunden",
        },
    },
}


def localize(key: str, language: str = _DEFAULT_LANGUAGE) -> str | None:
    """Look up a dotted key, falling back to English when untranslated."""
    value = _lookup(_TRANSLATIONS.get(language.split("-")[0].lower(), {}), key)
    if value is None and language != _DEFAULT_LANGUAGE:
        value = _lookup(_TRANSLATIONS[_DEFAULT_LANGUAGE], key)
    return value


def _lookup(table: dict[str, object], key: str) -> str | None:
    node: object = table
    for part in key.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, str) else None
