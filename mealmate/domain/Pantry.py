"""Pantry aggregate: the on-hand inventory a grocery list is checked against."""
from typing import List
from mealmate.domain.Ingredient import _as_text


class PantryEntry:
    def __init__(self, name: str = "", quantity: float = 0, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a PantryEntry from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return PantryEntry(
            name=_as_text(d.get("name")),
            quantity=d.get("quantity") or 0,
            unit=_as_text(d.get("unit")),
        )

    def to_dict(self):
        return {"name": self.name, "quantity": self.quantity, "unit": self.unit}


class Pantry:
    def __init__(self):
        self.items: List[PantryEntry] = []

    def add_item(self, item: PantryEntry):
        '''
        Adds an entry to the pantry.
        '''
        self.items.append(item)

    def remove_item(self, item: PantryEntry):
        '''
        Removes an entry from the pantry.
        '''
        self.items.remove(item)

    def get_items(self):
        '''
        Returns the list of pantry entries.
        '''
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''
        Populates the Pantry from a list of dictionaries.
        '''
        for item_data in data or []:
            self.add_item(PantryEntry.from_dict(item_data))
        return self

    def to_dict(self):
        '''
        Converts the Pantry to a list of dictionaries.
        '''
        return [item.to_dict() for item in self.items]
