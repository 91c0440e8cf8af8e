"""Ingredient presentation: unit, name and note resolution."""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from mealie_card.domain.ingredients import (
    LegacyUnit,
    PlainUnit,
    PresentationRecord,
    RawIngredient,
    UnitRecord,
    UnitValue,
)
from mealie_card.services.legacy_units import decode_legacy_unit

PLACEHOLDER_NAME = "Ingredient"

_logger = logging.getLogger(__name__)


def resolve_unit_name(unit: UnitValue) -> str:
    """Return the display name of a unit, decoding legacy text when needed."""
    if isinstance(unit, UnitRecord):
        return unit.name
    if isinstance(unit, LegacyUnit):
        decoded = decode_legacy_unit(unit.text)
        if decoded is None:
            return unit.text
        name = decoded.get("name")
        return name if isinstance(name, str) else ""
    if isinstance(unit, PlainUnit):
        return unit.text
    return ""


def format_quantity(value: float) -> str:
    """Format a quantity without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def resolve_ingredient(raw: RawIngredient) -> PresentationRecord:
    """Derive the quantity line, name and note shown for one ingredient."""
    quantity_line = None
    if raw.quantity:
        quantity_line = f"{format_quantity(raw.quantity)} {resolve_unit_name(raw.unit)}"

    food_name = raw.food_name or raw.display or ""
    note = raw.note or ""
    if food_name:
        return PresentationRecord(
            quantity_line=quantity_line,
            name_segment=food_name,
            note_segment=note if note and note != food_name else None,
        )
    if note:
        return PresentationRecord(
            quantity_line=quantity_line, name_segment=note, note_segment=None
        )
    return PresentationRecord(
        quantity_line=quantity_line,
        name_segment=PLACEHOLDER_NAME,
        note_segment=None,
        is_placeholder=True,
    )


def resolve_ingredients(items: Iterable[object] | None) -> list[PresentationRecord]:
    """Resolve raw ingredient payloads in order, one record per item."""
    if items is None:
        return []
    return [resolve_ingredient(RawIngredient.from_payload(item)) for item in items]


@dataclass
class IngredientPresenter:
    """Prepares ingredient lists for a recipe card."""

    debug: bool = False

    def present(
        self, items: Iterable[object] | None, show_ingredients: bool = True
    ) -> list[PresentationRecord]:
        """Return presentation records, or nothing when ingredients are hidden."""
        payloads = list(items or [])
        if self.debug and show_ingredients and payloads:
            _logger.debug(
                "Ingredient payloads: %s", json.dumps(payloads, indent=2, default=str)
            )
        if not show_ingredients:
            return []
        return resolve_ingredients(payloads)
