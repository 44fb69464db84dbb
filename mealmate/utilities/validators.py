"""
Request schemas for the grocery list API (Pydantic).

The schemas are deliberately lenient: missing or non-string names and amounts
become strings instead of failing validation, so the list builder can degrade
them to 'Other'/needed items.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from mealmate.utilities.config import EXCLUDE_STAPLES_DEFAULT


def _coerce_text(v):
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


def _coerce_number(v):
    """Numeric fields are informational only; anything unparseable counts as 0."""
    if isinstance(v, bool):
        return 0
    if isinstance(v, (int, float)):
        return v
    if isinstance(v, str):
        try:
            return float(v)
        except ValueError:
            return 0
    return 0


class MealIngredientInput(BaseModel):
    """Schema for one ingredient line of a planned meal."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    amount: str = ""
    notes: Optional[str] = None

    @field_validator('name', 'amount', mode='before')
    @classmethod
    def coerce_text(cls, v):
        """Turn missing or non-string values into strings."""
        return _coerce_text(v)

    @field_validator('notes', mode='before')
    @classmethod
    def coerce_notes(cls, v):
        return None if v is None else _coerce_text(v)


class PlannedMealInput(BaseModel):
    """Schema for a planned meal."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    ingredients: List[MealIngredientInput] = Field(default_factory=list)
    servings: float = 0

    @field_validator('name', mode='before')
    @classmethod
    def coerce_name(cls, v):
        return _coerce_text(v)

    @field_validator('ingredients', mode='before')
    @classmethod
    def default_ingredients(cls, v):
        return v or []

    @field_validator('servings', mode='before')
    @classmethod
    def coerce_servings(cls, v):
        return _coerce_number(v)


class PantryItemInput(BaseModel):
    """Schema for an on-hand pantry entry."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    quantity: float = 0
    unit: str = ""

    @field_validator('name', 'unit', mode='before')
    @classmethod
    def coerce_text(cls, v):
        return _coerce_text(v)

    @field_validator('quantity', mode='before')
    @classmethod
    def coerce_quantity(cls, v):
        return _coerce_number(v)


class GenerateGroceryListRequest(BaseModel):
    """Body of POST /api/generate-grocery-list (camelCase keys on the wire)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    household_id: str = Field(default="", alias="householdId")
    meals: List[PlannedMealInput]
    pantry_items: List[PantryItemInput] = Field(default_factory=list, alias="pantryItems")
    exclude_staples: bool = Field(default=EXCLUDE_STAPLES_DEFAULT, alias="excludeStaples")

    @field_validator('household_id', mode='before')
    @classmethod
    def coerce_household(cls, v):
        return _coerce_text(v)

    @field_validator('pantry_items', mode='before')
    @classmethod
    def default_pantry(cls, v):
        return v or []

    @field_validator('exclude_staples', mode='before')
    @classmethod
    def null_exclude_staples(cls, v):
        # The default applies only when the key is absent; an explicit null keeps staples
        return False if v is None else v
