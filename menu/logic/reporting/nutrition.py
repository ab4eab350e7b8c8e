"""Nutrition aggregation logic.

Sums the scaled nutrition of every selected recipe, expresses the totals as a
percentage of the daily reference values and classifies the result.
"""
from typing import Dict, List, Sequence, Tuple

from menu.domain.MenuBundle import NutritionSummary
from menu.domain.Nutrition import NUTRIENTS, NutritionFacts
from menu.domain.SelectedRecipe import SelectedRecipe
from menu.utilities.constants import (
    REFERENCE_DAILY_VALUES, NUTRITION_BANDS, LOW, HIGH,
    VERDICT_DEFICIENT, VERDICT_EXCESSIVE, VERDICT_BALANCED, VERDICT_PARTIAL,
    NUTRITION_SUGGESTIONS, BALANCED_SUGGESTION,
)
from menu.utilities.rounding import round_half_up


def recipe_contribution(selected: SelectedRecipe, party_size: int) -> NutritionFacts:
    """Nutrition of one recipe at the party size; recipes without data contribute zeros."""
    recipe = selected.recipe
    if recipe.nutrition_per_base is None:
        return NutritionFacts()
    return recipe.nutrition_per_base.scaled(party_size / recipe.base_servings)


def compute_totals(selection: Sequence[SelectedRecipe], party_size: int) -> NutritionFacts:
    totals = NutritionFacts()
    for sr in selection:
        totals = totals + recipe_contribution(sr, party_size)
    return totals


def compute_percentages(totals: NutritionFacts, reference: Dict[str, float] = REFERENCE_DAILY_VALUES) -> Dict[str, int]:
    return {n: round_half_up(totals.get(n) / reference[n] * 100) for n in NUTRIENTS}


def classify(totals: NutritionFacts, reference: Dict[str, float] = REFERENCE_DAILY_VALUES) -> Dict[str, str]:
    """Band label per classified nutrient plus an 'overall' verdict.

    Only calories, protein and fat carry bands; carbohydrate and fiber are
    reported as percentages only.
    """
    evaluation: Dict[str, str] = {}
    for nutrient, (low_below, high_above, ok_label) in NUTRITION_BANDS.items():
        ratio = totals.get(nutrient) / reference[nutrient]
        if ratio < low_below:
            evaluation[nutrient] = LOW
        elif ratio > high_above:
            evaluation[nutrient] = HIGH
        else:
            evaluation[nutrient] = ok_label

    low_count = sum(1 for v in evaluation.values() if v == LOW)
    high_count = sum(1 for v in evaluation.values() if v == HIGH)
    if low_count > 2:
        overall = VERDICT_DEFICIENT
    elif high_count > 2:
        overall = VERDICT_EXCESSIVE
    elif evaluation.get("protein") == NUTRITION_BANDS["protein"][2] and evaluation.get("fat") == NUTRITION_BANDS["fat"][2]:
        overall = VERDICT_BALANCED
    else:
        overall = VERDICT_PARTIAL
    evaluation["overall"] = overall
    return evaluation


def suggestions_for(evaluation: Dict[str, str]) -> Tuple[str, ...]:
    suggestions: List[str] = []
    for nutrient in NUTRITION_BANDS:
        text = NUTRITION_SUGGESTIONS.get((nutrient, evaluation.get(nutrient)))
        if text:
            suggestions.append(text)
    if not suggestions:
        suggestions.append(BALANCED_SUGGESTION)
    return tuple(suggestions)


def aggregate_nutrition(selection: Sequence[SelectedRecipe], party_size: int) -> NutritionSummary:
    """Aggregate nutrition for a menu.

    Returns a NutritionSummary with:
      totals       summed nutrients at the party size
      percentages  {nutrient: int} share of the daily reference value
      evaluation   {'calories'|'protein'|'fat': band, 'overall': verdict}
      suggestions  one per out-of-band nutrient, or the balanced default
    """
    totals = compute_totals(selection, party_size)
    evaluation = classify(totals)
    return NutritionSummary(
        totals=totals,
        percentages=compute_percentages(totals),
        evaluation=evaluation,
        suggestions=suggestions_for(evaluation),
    )


__all__ = ["aggregate_nutrition", "compute_totals", "compute_percentages", "classify", "suggestions_for"]
