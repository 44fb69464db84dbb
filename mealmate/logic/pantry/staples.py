"""Pantry and staple checks deciding whether a grocery item still has to be bought."""
from __future__ import annotations
from typing import Any, Iterable
from mealmate.logic.shopping.normalize import normalize_ingredient
from mealmate.utilities.constants import COMMON_STAPLES

__all__ = ["is_in_pantry", "is_staple", "is_needed"]


def _entry_name(entry: Any) -> str:
    if isinstance(entry, dict):
        return entry.get('name') or ''
    return getattr(entry, 'name', '') or ''


def is_in_pantry(ingredient_name: str, pantry_items: Iterable[Any]) -> bool:
    """True if the ingredient and any pantry entry contain one another once normalized.

    Containment is checked both ways, so "eggs" on hand covers "Eggs" and
    "large eggs", and also short names inside longer ones ("egg" in "eggplant").
    """
    normalized = normalize_ingredient(ingredient_name)
    for entry in pantry_items or []:
        pantry_normalized = normalize_ingredient(_entry_name(entry))
        if pantry_normalized in normalized or normalized in pantry_normalized:
            return True
    return False


def is_staple(ingredient_name: str) -> bool:
    """True if the normalized name contains a common staple (salt, oil, flour...)."""
    normalized = normalize_ingredient(ingredient_name)
    return any(staple in normalized for staple in COMMON_STAPLES)


def is_needed(ingredient_name: str, pantry_items: Iterable[Any], *, exclude_staples: bool = True) -> bool:
    in_pantry = is_in_pantry(ingredient_name, pantry_items)
    staple = exclude_staples and is_staple(ingredient_name)
    return not in_pantry and not staple
