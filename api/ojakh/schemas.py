"""
Ojakh API schemas (request models).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class IngredientEntry(BaseModel):
    # Blank names are accepted here and skipped when linking.
    name: str | None = None
    amount: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def _amount_as_text(cls, value: Any) -> Any:
        # Amount is free text: 3 -> "3".
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class RecipeWriteRequest(BaseModel):
    title: str
    category: str | None = None
    cover_image_url: str | None = None
    ingredients: list[IngredientEntry] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)

    def ingredient_entries(self) -> list[dict[str, Any]]:
        return [entry.model_dump() for entry in self.ingredients]


class FindByIngredientsRequest(BaseModel):
    myIngredients: list[str] | None = None
