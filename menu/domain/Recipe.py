"""Recipe domain entity: categories, seasons, difficulty, timings, base servings, ingredients, nutrition, tags."""
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from menu.domain.Ingredient import Ingredient
from menu.domain.MenuRequest import Difficulty, normalize_season
from menu.domain.Nutrition import NutritionFacts
from menu.domain.errors import DataError


def _pick(d: dict, *keys, default=None):
    for k in keys:
        if k in d and d[k] is not None:
            return d[k]
    return default


def _labels(values) -> FrozenSet[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(str(v).strip().lower() for v in values if v and str(v).strip())


@dataclass(frozen=True)
class Recipe:
    id: str
    name: str
    categories: FrozenSet[str] = frozenset()
    seasons: FrozenSet[str] = frozenset()
    difficulty: Optional[Difficulty] = None
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    base_servings: Optional[int] = 1
    ingredients: Tuple[Ingredient, ...] = ()
    seasonings: Tuple[Ingredient, ...] = ()
    nutrition_per_base: Optional[NutritionFacts] = None
    tags: FrozenSet[str] = frozenset()

    @property
    def total_time_minutes(self) -> int:
        return (self.prep_time_minutes or 0) + (self.cook_time_minutes or 0)

    def __str__(self) -> str:
        return (f"{self.name} ({self.id}) - {'/'.join(sorted(self.categories))} - "
                f"serves {self.base_servings} - {self.total_time_minutes} min")

    @staticmethod
    def from_dict(data):
        '''Builds a Recipe from catalog JSON (snake_case or camelCase keys).

        Raises DataError when a label (difficulty, season) is not part of the
        vocabulary; numeric invariants are left for the scaler to enforce.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        recipe_id = str(_pick(d, "id", "recipe_id", default="") or d.get("name", ""))
        name = str(d.get("name") or recipe_id)

        raw_difficulty = _pick(d, "difficulty")
        try:
            difficulty = Difficulty.parse(raw_difficulty) if raw_difficulty not in (None, "") else None
            seasons = frozenset(normalize_season(s) for s in _labels(d.get("seasons")))
        except ValueError as e:
            raise DataError(str(e), recipe_id=recipe_id) from e

        nutrition_raw = _pick(d, "nutrition_per_base", "nutritionPerBase", "nutrition")
        return Recipe(
            id=recipe_id,
            name=name,
            categories=_labels(d.get("categories")),
            seasons=seasons,
            difficulty=difficulty,
            prep_time_minutes=_pick(d, "prep_time_minutes", "prepTimeMinutes", default=0),
            cook_time_minutes=_pick(d, "cook_time_minutes", "cookTimeMinutes", default=0),
            base_servings=_pick(d, "base_servings", "baseServings", "servings"),
            ingredients=tuple(Ingredient.from_dict(i) for i in d.get("ingredients") or []),
            seasonings=tuple(Ingredient.from_dict(i) for i in d.get("seasonings") or []),
            nutrition_per_base=NutritionFacts.from_dict(nutrition_raw) if nutrition_raw else None,
            tags=_labels(d.get("tags")),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "categories": sorted(self.categories),
            "seasons": sorted(self.seasons),
            "difficulty": self.difficulty.label if self.difficulty is not None else None,
            "prep_time_minutes": self.prep_time_minutes,
            "cook_time_minutes": self.cook_time_minutes,
            "base_servings": self.base_servings,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "seasonings": [s.to_dict() for s in self.seasonings],
            "nutrition_per_base": self.nutrition_per_base.to_dict() if self.nutrition_per_base else None,
            "tags": sorted(self.tags),
        }
