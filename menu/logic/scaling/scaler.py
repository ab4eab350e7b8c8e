"""Serving scaler: convert a recipe's authored quantities to the requested party size."""
from __future__ import annotations
import math
import numbers
from typing import Tuple

from menu.domain.Ingredient import Ingredient
from menu.domain.Nutrition import NUTRIENTS
from menu.domain.Recipe import Recipe
from menu.domain.SelectedRecipe import SelectedRecipe
from menu.domain.errors import DataError
from menu.utilities.rounding import round_half_up


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def _check_quantities(recipe: Recipe, items: Tuple[Ingredient, ...], kind: str) -> None:
    for ing in items:
        if not _is_number(ing.quantity) or ing.quantity < 0:
            raise DataError(f"{kind} '{ing.name}' has malformed quantity {ing.quantity!r}", recipe_id=recipe.id)


def _check_times(recipe: Recipe) -> None:
    for label, minutes in (("prep time", recipe.prep_time_minutes), ("cook time", recipe.cook_time_minutes)):
        if not _is_number(minutes) or minutes < 0:
            raise DataError(f"{label} must be a non-negative number of minutes, got {minutes!r}", recipe_id=recipe.id)


def _check_nutrition(recipe: Recipe) -> None:
    facts = recipe.nutrition_per_base
    if facts is None:
        return
    for nutrient in NUTRIENTS:
        value = facts.get(nutrient)
        if not _is_number(value) or value < 0:
            raise DataError(f"nutrition {nutrient} is malformed: {value!r}", recipe_id=recipe.id)


def ensure_scalable(recipe: Recipe) -> None:
    """Raise DataError if the recipe cannot enter the pipeline.

    Checks base servings >= 1, finite non-negative quantities, timings and
    nutrition values.
    """
    base = recipe.base_servings
    if not _is_number(base) or base < 1:
        raise DataError(f"base servings must be >= 1, got {base!r}", recipe_id=recipe.id)
    _check_quantities(recipe, recipe.ingredients, "ingredient")
    _check_quantities(recipe, recipe.seasonings, "seasoning")
    _check_times(recipe)
    _check_nutrition(recipe)


def scale_quantity(quantity, ratio: float) -> float:
    return round_half_up(quantity * ratio, 1)


def scale_recipe(recipe: Recipe, party_size: int) -> SelectedRecipe:
    """Scale every ingredient and seasoning by party_size / base_servings.

    The Recipe itself is never touched; the scaled lists live on the returned
    SelectedRecipe.
    """
    ensure_scalable(recipe)
    ratio = party_size / recipe.base_servings
    return SelectedRecipe(
        recipe=recipe,
        party_size=party_size,
        ratio=ratio,
        scaled_ingredients=tuple(i.with_quantity(scale_quantity(i.quantity, ratio)) for i in recipe.ingredients),
        scaled_seasonings=tuple(s.with_quantity(scale_quantity(s.quantity, ratio)) for s in recipe.seasonings),
    )


__all__ = ["ensure_scalable", "scale_quantity", "scale_recipe"]
