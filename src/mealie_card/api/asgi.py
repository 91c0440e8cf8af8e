"""ASGI entrypoint for the recipe card API."""

from mealie_card.api.app import create_app
from mealie_card.containers import build_container

app = create_app(build_container())
