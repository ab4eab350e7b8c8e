"""Filter pipeline: reduce the catalog to the recipes eligible for a MenuRequest.

Each predicate is a plain function ``(recipe, request) -> bool``; a pipeline is
just an ordered tuple of them. Predicates are independent, so their order
affects speed only, never the result.
"""
from __future__ import annotations
import logging
from typing import Callable, Iterable, List, NamedTuple, Sequence, Tuple

from menu.domain.MenuRequest import MenuRequest
from menu.domain.Recipe import Recipe
from menu.utilities.constants import ANY_SEASON, RELAXATION_THRESHOLD

logger = logging.getLogger(__name__)

Predicate = Callable[[Recipe, MenuRequest], bool]


def season_matches(recipe: Recipe, request: MenuRequest) -> bool:
    if request.season == ANY_SEASON or not recipe.seasons:
        return True
    return request.season in recipe.seasons


def within_difficulty(recipe: Recipe, request: MenuRequest) -> bool:
    if request.max_difficulty is None or recipe.difficulty is None:
        return True
    return recipe.difficulty <= request.max_difficulty


def within_time_budget(recipe: Recipe, request: MenuRequest) -> bool:
    if request.max_total_cook_minutes is None:
        return True
    return recipe.total_time_minutes <= request.max_total_cook_minutes


def respects_exclusions(recipe: Recipe, request: MenuRequest) -> bool:
    return not (recipe.tags & request.dietary_exclusions)


DEFAULT_PREDICATES: Tuple[Predicate, ...] = (
    season_matches,
    within_difficulty,
    within_time_budget,
    respects_exclusions,
)


class FilterResult(NamedTuple):
    recipes: List[Recipe]
    relaxed: bool


def apply_predicates(recipes: Iterable[Recipe], request: MenuRequest,
                     predicates: Sequence[Predicate] = DEFAULT_PREDICATES) -> List[Recipe]:
    """Single pass: keep the recipes that satisfy every predicate, catalog order preserved."""
    return [r for r in recipes if all(p(r, request) for p in predicates)]


def run_filters(recipes: Sequence[Recipe], request: MenuRequest,
                predicates: Sequence[Predicate] = DEFAULT_PREDICATES,
                threshold: int = RELAXATION_THRESHOLD) -> FilterResult:
    """Filter with at most one relaxation retry.

    When fewer than ``threshold`` recipes pass, the pipeline is re-run once
    with the difficulty ceiling removed. Whatever that second pass yields is
    returned, even if it is still short or empty.
    """
    strict = apply_predicates(recipes, request, predicates)
    if len(strict) >= threshold:
        return FilterResult(strict, False)
    relaxed = apply_predicates(recipes, request.without_difficulty_ceiling(), predicates)
    logger.debug("Only %d recipes passed strict filters; relaxed difficulty -> %d", len(strict), len(relaxed))
    return FilterResult(relaxed, True)


def filter_recipes(recipes: Sequence[Recipe], request: MenuRequest,
                   predicates: Sequence[Predicate] = DEFAULT_PREDICATES) -> List[Recipe]:
    return run_filters(recipes, request, predicates).recipes


__all__ = [
    "Predicate", "FilterResult", "DEFAULT_PREDICATES",
    "season_matches", "within_difficulty", "within_time_budget", "respects_exclusions",
    "apply_predicates", "run_filters", "filter_recipes",
]
