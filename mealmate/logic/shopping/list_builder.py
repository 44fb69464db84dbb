"""Grocery list builder.

Provides build_grocery_list(meals, pantry_items=(), exclude_staples=True): merges the
ingredient lines of the planned meals into one deduplicated, aisle-grouped list and
drops whatever is already in the pantry or is a common staple.
"""
from typing import Any, Dict, Iterable, List
from mealmate.domain.GroceryItem import GroceryItem
from mealmate.domain.Meal import PlannedMeal
from mealmate.domain.ShoppingList import GroceryList, GroceryListSummary
from mealmate.logic.pantry.staples import is_needed
from mealmate.logic.shopping.aisles import classify_aisle
from mealmate.logic.shopping.normalize import normalize_ingredient


def _as_meal(meal: Any) -> PlannedMeal:
    return meal if isinstance(meal, PlannedMeal) else PlannedMeal.from_dict(meal)


def collect_ingredients(meals: Iterable[Any], pantry_items: Iterable[Any] = (), *,
                        exclude_staples: bool = True) -> Dict[str, GroceryItem]:
    """Merge every ingredient line into a map keyed by normalized name.

    The first line seen for a key decides the display name, aisle and whether
    it is needed; later lines only add their meal to `sources` and their amount
    to the comma-joined `amount` string.
    """
    pantry = list(pantry_items or [])
    merged: Dict[str, GroceryItem] = {}
    for meal in meals:
        meal = _as_meal(meal)
        for ing in meal.ingredients:
            key = normalize_ingredient(ing.name)
            existing = merged.get(key)
            if existing is not None:
                existing.add_source(meal.name)
                existing.merge_amount(ing.amount)
                continue
            merged[key] = GroceryItem(
                name=ing.name,
                amount=ing.amount,
                aisle=classify_aisle(ing.name),
                needed=is_needed(ing.name, pantry, exclude_staples=exclude_staples),
                sources=[meal.name],
            )
    return merged


def group_by_aisle(items: List[GroceryItem]) -> Dict[str, List[GroceryItem]]:
    grouped: Dict[str, List[GroceryItem]] = {}
    for item in items:
        grouped.setdefault(item.aisle, []).append(item)
    return grouped


def build_grocery_list(meals: Iterable[Any], pantry_items: Iterable[Any] = (), *,
                       exclude_staples: bool = True) -> GroceryList:
    """Compute the grocery list for a set of planned meals.

    Args:
        meals: PlannedMeal objects or dicts ({name, ingredients: [{name, amount}], servings}).
        pantry_items: PantryEntry objects or dicts with at least a name.
        exclude_staples: If True, common staples (salt, oil...) are treated as on hand.

    Returns:
        GroceryList whose items are the needed ones, stably sorted by aisle label.
    """
    meals = list(meals)
    merged = collect_ingredients(meals, pantry_items, exclude_staples=exclude_staples)

    needed = [item for item in merged.values() if item.needed]
    needed.sort(key=lambda item: item.aisle)
    grouped = group_by_aisle(needed)

    summary = GroceryListSummary(
        total_items=len(needed),
        by_aisle=[{"aisle": aisle, "count": len(items)} for aisle, items in grouped.items()],
        meals_included=len(meals),
        items_in_pantry=len(merged) - len(needed),
    )
    return GroceryList(items=needed, grouped_by_aisle=grouped, summary=summary)


__all__ = ['build_grocery_list', 'collect_ingredients', 'group_by_aisle']
