"""Pydantic models for the ingredient presentation endpoint."""

from typing import Any

from pydantic import BaseModel, Field

from mealie_card.domain.ingredients import PresentationRecord


class PresentIngredientsRequest(BaseModel):
    """Raw ingredient payloads to resolve.

    Items are kept as untyped values so malformed records still produce one
    presentation line each instead of failing validation.
    """

    ingredients: list[Any] = Field(default_factory=list)
    show_ingredients: bool = True


class PresentedIngredient(BaseModel):
    """One render-ready ingredient line."""

    quantity_line: str | None
    name_segment: str
    note_segment: str | None
    is_placeholder: bool

    @classmethod
    def from_record(cls, record: PresentationRecord) -> "PresentedIngredient":
        return cls(
            quantity_line=record.quantity_line,
            name_segment=record.name_segment,
            note_segment=record.note_segment,
            is_placeholder=record.is_placeholder,
        )


class PresentIngredientsResponse(BaseModel):
    """Presentation records in input order."""

    items: list[PresentedIngredient]
