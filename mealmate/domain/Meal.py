"""PlannedMeal domain entity: a meal on the plan with its ingredient lines and servings."""
from typing import List, Optional
from mealmate.domain.Ingredient import MealIngredient, _as_text


class PlannedMeal:
    def __init__(self, name: str = "", ingredients: Optional[List[MealIngredient]] = None, servings: float = 0):
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        self.servings = servings

    def __str__(self) -> str:
        return f"{self.name} - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return PlannedMeal(
            name=_as_text(d.get("name")),
            ingredients=[MealIngredient.from_dict(ing) for ing in d.get("ingredients") or []],
            servings=d.get("servings") or 0,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "servings": self.servings,
        }
