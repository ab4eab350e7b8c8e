"""Ingredient value: name, quantity as authored, unit."""
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Ingredient:
    name: str = ""
    quantity: Any = 0
    unit: str = ""

    def with_quantity(self, quantity) -> "Ingredient":
        '''Returns a copy carrying a different quantity; the original is left untouched.'''
        return replace(self, quantity=quantity)

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit}".rstrip()

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.

        The quantity is kept as given so that malformed values surface as
        DataError at scale time instead of being silently coerced here.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        quantity = d.get("quantity", d.get("default_quantity", 0))
        return Ingredient(
            name=str(d.get("name") or "").strip(),
            quantity=0 if quantity is None else quantity,
            unit=str(d.get("unit") or "").strip(),
        )

    def to_dict(self):
        '''Converts the Ingredient to a JSON-ready dictionary.'''
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
