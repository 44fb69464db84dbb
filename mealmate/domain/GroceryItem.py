"""GroceryItem domain entity: one deduplicated line of a generated grocery list."""
from typing import List, Optional
from mealmate.utilities.constants import AMOUNT_SEPARATOR


class GroceryItem:
    def __init__(self, name: str = "", amount: str = "", aisle: str = "", needed: bool = True,
                 sources: Optional[List[str]] = None):
        self.name = name
        self.amount = amount
        self.aisle = aisle
        self.needed = needed
        self.sources = sources[:] if sources else []

    def add_source(self, meal_name: str):
        '''Records another meal that needs this item (exact-name dedup).'''
        if meal_name not in self.sources:
            self.sources.append(meal_name)

    def merge_amount(self, amount: str):
        '''Appends an amount unless the combined amount string already contains it.'''
        if amount not in self.amount:
            self.amount = f"{self.amount}{AMOUNT_SEPARATOR}{amount}"

    def __str__(self) -> str:
        status = "needed" if self.needed else "on hand"
        return f"{self.name} - {self.amount} - {self.aisle} - {status} - From: {', '.join(self.sources)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return GroceryItem(
            name=d.get("name", ""),
            amount=d.get("amount", ""),
            aisle=d.get("aisle", ""),
            needed=bool(d.get("needed", True)),
            sources=list(d.get("sources") or []),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "aisle": self.aisle,
            "needed": self.needed,
            "sources": list(self.sources),
        }
