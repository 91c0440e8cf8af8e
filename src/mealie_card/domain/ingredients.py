"""Domain models for recipe ingredients."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from mealie_card.services.legacy_units import looks_like_legacy_unit


@dataclass(frozen=True)
class UnitRecord:
    """Structured unit object as returned by the recipe service."""

    name: str
    fields: Mapping[str, object] = field(default_factory=dict)


@dataclass(frozen=True)
class PlainUnit:
    """Unit given as a bare name string."""

    text: str


@dataclass(frozen=True)
class LegacyUnit:
    """Unit serialized as a Python dictionary literal."""

    text: str


UnitValue = UnitRecord | PlainUnit | LegacyUnit | None


def classify_unit(value: object) -> UnitValue:
    """Map a raw unit field onto one of the unit variants."""
    if isinstance(value, Mapping):
        name = value.get("name")
        return UnitRecord(name=name if isinstance(name, str) else "", fields=value)
    if looks_like_legacy_unit(value):
        return LegacyUnit(value)
    if isinstance(value, str):
        return PlainUnit(value)
    return None


@dataclass(frozen=True)
class RawIngredient:
    """Ingredient record as supplied by the recipe service."""

    quantity: float | None = None
    unit: UnitValue = None
    food_name: str | None = None
    display: str | None = None
    note: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "RawIngredient":
        """Build an ingredient from an untrusted payload without raising."""
        if not isinstance(payload, Mapping):
            return cls()
        food = payload.get("food")
        food_name = food.get("name") if isinstance(food, Mapping) else None
        return cls(
            quantity=_coerce_quantity(payload.get("quantity")),
            unit=classify_unit(payload.get("unit")),
            food_name=food_name if isinstance(food_name, str) else None,
            display=_optional_str(payload.get("display")),
            note=_optional_str(payload.get("note")),
        )


@dataclass(frozen=True)
class PresentationRecord:
    """Render-ready representation of one ingredient."""

    quantity_line: str | None
    name_segment: str
    note_segment: str | None
    is_placeholder: bool = False


def _optional_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _coerce_quantity(value: object) -> float | None:
    """Return a finite numeric quantity, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
