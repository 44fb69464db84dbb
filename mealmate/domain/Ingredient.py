"""MealIngredient domain entity: one ingredient line of a planned meal (name, amount, optional notes)."""
from typing import Optional


def _as_text(value) -> str:
    '''Coerces a loosely-typed field to a string ("" for missing values).'''
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class MealIngredient:
    def __init__(self, name: str = "", amount: str = "", notes: Optional[str] = None):
        self.name = name
        self.amount = amount
        self.notes = notes

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.amount}"]
        if self.notes:
            parts.append(f"Notes: {self.notes}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a MealIngredient from a dictionary. Ignores unknown keys, never fails.'''
        d = dict(data) if isinstance(data, dict) else {}
        notes = d.get("notes")
        return MealIngredient(
            name=_as_text(d.get("name")),
            amount=_as_text(d.get("amount")),
            notes=_as_text(notes) if notes is not None else None,
        )

    def to_dict(self):
        d = {"name": self.name, "amount": self.amount}
        if self.notes is not None:
            d["notes"] = self.notes
        return d
