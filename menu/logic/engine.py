"""Menu engine: Catalog -> Screen -> Filter -> Select -> Scale -> (Nutrition, Shopping list).

A single stateless pass. Configuration (predicates, keyword table, random
source) comes in as arguments; nothing is kept between calls.
"""
from __future__ import annotations
import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from menu.domain.MenuBundle import MenuBundle, RecipeDiagnostic
from menu.domain.MenuRequest import MenuRequest
from menu.domain.Recipe import Recipe
from menu.domain.errors import DataError
from menu.logic.filtering.pipeline import DEFAULT_PREDICATES, Predicate, run_filters
from menu.logic.reporting.nutrition import aggregate_nutrition
from menu.logic.scaling.scaler import ensure_scalable, scale_recipe
from menu.logic.selection.selector import make_rng, select_by_category, selection_targets
from menu.logic.shopping.list_builder import KeywordTable, build_shopping_list
from menu.logic.tips import cooking_tips
from menu.utilities.constants import INGREDIENT_CATEGORY_KEYWORDS, MENU_CATEGORIES

logger = logging.getLogger(__name__)


def screen_recipes(recipes: Sequence[Recipe]) -> Tuple[List[Recipe], List[RecipeDiagnostic]]:
    """Split recipes into scalable ones and diagnostics for those raising DataError."""
    ok: List[Recipe] = []
    diagnostics: List[RecipeDiagnostic] = []
    for r in recipes:
        try:
            ensure_scalable(r)
        except DataError as e:
            logger.warning("Skipping recipe %s: %s", r.id, e)
            diagnostics.append(RecipeDiagnostic(recipe_id=r.id, recipe_name=r.name, reason=str(e.args[0])))
            continue
        ok.append(r)
    return ok, diagnostics


def recommend_menu(recipes: Sequence[Recipe], request: MenuRequest, *,
                   rng: Optional[random.Random] = None,
                   seed: Optional[int] = None,
                   predicates: Sequence[Predicate] = DEFAULT_PREDICATES,
                   keyword_table: KeywordTable = INGREDIENT_CATEGORY_KEYWORDS,
                   catalog_diagnostics: Sequence[RecipeDiagnostic] = ()) -> MenuBundle:
    """Build a MenuBundle for `request` from `recipes`.

    Pass either an explicit ``rng`` or a ``seed``; with neither, selection is
    seeded from the clock. Recipes violating data invariants are dropped and
    reported in ``diagnostics`` before filtering, so the relaxation threshold
    only counts selectable recipes. ``catalog_diagnostics`` (entries dropped
    while loading the catalog) are listed first. Short categories are listed
    in ``under_supplied``. Neither case raises.
    """
    if rng is None:
        rng = make_rng(seed)

    screened, diagnostics = screen_recipes(recipes)
    filtered = run_filters(screened, request, predicates)

    picked = select_by_category(filtered.recipes, request, rng)
    targets = selection_targets(request.party_size)
    under_supplied = tuple(cat for cat in MENU_CATEGORIES if len(picked[cat]) < targets[cat])

    menu: Dict[str, tuple] = {
        cat: tuple(scale_recipe(r, request.party_size) for r in picked[cat]) for cat in MENU_CATEGORIES
    }
    selection = [sr for cat in MENU_CATEGORIES for sr in menu[cat]]

    logger.debug("Menu for %s: %d dishes, relaxed=%s, under-supplied=%s",
                 request.fingerprint(), len(selection), filtered.relaxed, under_supplied)

    return MenuBundle(
        menu=menu,
        nutrition=aggregate_nutrition(selection, request.party_size),
        shopping_list=build_shopping_list(selection, request.party_size, keyword_table=keyword_table),
        cooking_tips=cooking_tips(picked, request),
        diagnostics=tuple(catalog_diagnostics) + tuple(diagnostics),
        relaxed=filtered.relaxed,
        under_supplied=under_supplied,
    )


__all__ = ["recommend_menu", "screen_recipes"]
