"""MenuBundle: the selected menu plus the nutrition summary and shopping list derived from it."""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from menu.domain.Nutrition import NutritionFacts
from menu.domain.SelectedRecipe import SelectedRecipe
from menu.domain.ShoppingList import ShoppingList
from menu.utilities.constants import MENU_CATEGORIES


@dataclass(frozen=True)
class NutritionSummary:
    totals: NutritionFacts
    percentages: Dict[str, int]
    evaluation: Dict[str, str]
    suggestions: Tuple[str, ...]

    @property
    def overall(self) -> str:
        return self.evaluation.get("overall", "")

    def to_dict(self):
        return {
            "totals": self.totals.to_dict(),
            "percentages": dict(self.percentages),
            "evaluation": dict(self.evaluation),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class RecipeDiagnostic:
    recipe_id: Optional[str]
    recipe_name: str
    reason: str

    def to_dict(self):
        return {"recipe_id": self.recipe_id, "recipe_name": self.recipe_name, "reason": self.reason}


@dataclass(frozen=True)
class MenuBundle:
    menu: Dict[str, Tuple[SelectedRecipe, ...]]
    nutrition: NutritionSummary
    shopping_list: ShoppingList
    cooking_tips: Tuple[str, ...] = ()
    diagnostics: Tuple[RecipeDiagnostic, ...] = ()
    relaxed: bool = False
    under_supplied: Tuple[str, ...] = ()

    def selected(self) -> Tuple[SelectedRecipe, ...]:
        '''Every selected recipe, category by category.'''
        return tuple(sr for cat in MENU_CATEGORIES for sr in self.menu.get(cat, ()))

    def to_dict(self):
        return {
            "menu": {cat: [sr.to_dict() for sr in self.menu.get(cat, ())] for cat in MENU_CATEGORIES},
            "nutrition": self.nutrition.to_dict(),
            "shopping_list": self.shopping_list.to_dict(),
            "tips": list(self.cooking_tips),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "relaxed": self.relaxed,
            "under_supplied": list(self.under_supplied),
        }


__all__ = ["MenuBundle", "NutritionSummary", "RecipeDiagnostic"]
