"""Aisle classifier: keyword-substring matching of ingredient names onto store aisles."""
from mealmate.utilities.constants import AISLE_KEYWORDS, AISLES, OTHER

__all__ = ["classify_aisle", "AISLES"]


def classify_aisle(ingredient_name: str) -> str:
    """Return the aisle label for an ingredient name.

    Only lower-cases the name; punctuation is kept. Categories are tried in
    AISLE_KEYWORDS order and the first one with a keyword contained in the
    name wins, so ambiguous keywords ("pepper") resolve to the earlier aisle.
    Names that match nothing land in 'Other'.
    """
    name = (ingredient_name or '').lower()
    for aisle, keywords in AISLE_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return aisle
    return OTHER
