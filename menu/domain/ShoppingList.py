"""ShoppingList aggregate: purchase items grouped by shopping category."""
from dataclasses import dataclass
from typing import Dict, Tuple

from menu.utilities.constants import SHOPPING_CATEGORIES


@dataclass(frozen=True)
class ShoppingItem:
    name: str
    quantity: float
    unit: str
    category: str
    purchased: bool = False

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}"

    def to_dict(self):
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "purchased": self.purchased,
        }


@dataclass(frozen=True)
class ShoppingList:
    party_size: int
    categories: Dict[str, Tuple[ShoppingItem, ...]]
    total_items: int
    category_counts: Dict[str, int]
    tips: Tuple[str, ...] = ()
    unit_conflicts: Tuple[str, ...] = ()

    def get_items(self):
        '''
        Returns every item, category by category in display order.
        '''
        return [item for cat in SHOPPING_CATEGORIES for item in self.categories.get(cat, ())]

    def find(self, name: str):
        for item in self.get_items():
            if item.name == name:
                return item
        return None

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.get_items())
        return f"Shopping List ({self.total_items} items):\n\t{items_str}"

    def to_dict(self):
        return {
            "party_size": self.party_size,
            "categories": {cat: [i.to_dict() for i in self.categories.get(cat, ())] for cat in SHOPPING_CATEGORIES},
            "total_items": self.total_items,
            "category_counts": dict(self.category_counts),
            "tips": list(self.tips),
            "unit_conflicts": list(self.unit_conflicts),
        }
