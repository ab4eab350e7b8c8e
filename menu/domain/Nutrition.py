"""Nutrition facts for a recipe at its base serving count."""
import math
from dataclasses import dataclass, fields
from typing import Any, Dict

NUTRIENTS = ("calories", "protein", "carbohydrate", "fat", "fiber")


def _num(value: Any) -> float:
    """Unparsable or non-finite values count as missing (0)."""
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class NutritionFacts:
    calories: float = 0.0
    protein: float = 0.0
    carbohydrate: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0

    def scaled(self, ratio: float) -> "NutritionFacts":
        return NutritionFacts(**{f.name: getattr(self, f.name) * ratio for f in fields(self)})

    def __add__(self, other: "NutritionFacts") -> "NutritionFacts":
        if not isinstance(other, NutritionFacts):
            return NotImplemented
        return NutritionFacts(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})

    def get(self, nutrient: str) -> float:
        return getattr(self, nutrient)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "NutritionFacts":
        if not isinstance(data, dict):
            return NutritionFacts()
        # Normalize key synonyms
        return NutritionFacts(
            calories=_num(data.get("calories", data.get("kcal"))),
            protein=_num(data.get("protein")),
            carbohydrate=_num(data.get("carbohydrate", data.get("carbohydrates", data.get("carbs")))),
            fat=_num(data.get("fat", data.get("fats"))),
            fiber=_num(data.get("fiber", data.get("fibre"))),
        )

    def to_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in NUTRIENTS}


__all__ = ["NutritionFacts", "NUTRIENTS"]
