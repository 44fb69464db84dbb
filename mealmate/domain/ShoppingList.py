"""GroceryList aggregate: needed items, their aisle grouping and the summary counts."""
from typing import Dict, List, Optional
from mealmate.domain.GroceryItem import GroceryItem


class GroceryListSummary:
    def __init__(self, total_items: int = 0, by_aisle: Optional[List[Dict[str, object]]] = None,
                 meals_included: int = 0, items_in_pantry: int = 0):
        self.total_items = total_items
        self.by_aisle = by_aisle[:] if by_aisle else []
        self.meals_included = meals_included
        self.items_in_pantry = items_in_pantry

    def count_for(self, aisle: str) -> int:
        for entry in self.by_aisle:
            if entry["aisle"] == aisle:
                return int(entry["count"])
        return 0

    def to_dict(self):
        return {
            "totalItems": self.total_items,
            "byAisle": [dict(entry) for entry in self.by_aisle],
            "mealsIncluded": self.meals_included,
            "itemsInPantry": self.items_in_pantry,
        }


class GroceryList:
    def __init__(self, items: Optional[List[GroceryItem]] = None,
                 grouped_by_aisle: Optional[Dict[str, List[GroceryItem]]] = None,
                 summary: Optional[GroceryListSummary] = None):
        self.items = items[:] if items else []
        self.grouped_by_aisle = dict(grouped_by_aisle) if grouped_by_aisle else {}
        self.summary = summary or GroceryListSummary()

    def get_items(self):
        '''
        Returns the needed grocery items, sorted by aisle.
        '''
        return self.items

    def aisles(self) -> List[str]:
        '''
        Returns the aisle labels present in the list, in list order.
        '''
        return list(self.grouped_by_aisle.keys())

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Grocery List Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        '''
        Converts the list to the JSON shape returned by the API.
        '''
        return {
            "items": [item.to_dict() for item in self.items],
            "groupedByAisle": {
                aisle: [item.to_dict() for item in items]
                for aisle, items in self.grouped_by_aisle.items()
            },
            "summary": self.summary.to_dict(),
        }
