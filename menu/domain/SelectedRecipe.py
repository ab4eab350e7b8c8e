"""A recipe chosen for a menu, together with its ingredients scaled to the party size."""
from dataclasses import dataclass
from typing import Tuple

from menu.domain.Ingredient import Ingredient
from menu.domain.Recipe import Recipe


@dataclass(frozen=True)
class SelectedRecipe:
    recipe: Recipe
    party_size: int
    ratio: float
    scaled_ingredients: Tuple[Ingredient, ...] = ()
    scaled_seasonings: Tuple[Ingredient, ...] = ()

    @property
    def name(self) -> str:
        return self.recipe.name

    def all_scaled(self) -> Tuple[Ingredient, ...]:
        return self.scaled_ingredients + self.scaled_seasonings

    def to_dict(self):
        d = self.recipe.to_dict()
        d["party_size"] = self.party_size
        d["ratio"] = self.ratio
        d["scaled_ingredients"] = [i.to_dict() for i in self.scaled_ingredients]
        d["scaled_seasonings"] = [s.to_dict() for s in self.scaled_seasonings]
        return d
