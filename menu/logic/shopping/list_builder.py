"""Shopping list builder.

Provides build_shopping_list(selection, party_size): merges the scaled
ingredients of every selected recipe into one categorized purchase list.
"""
from collections import OrderedDict
import logging
import unicodedata
from typing import Callable, Dict, List, Sequence, Tuple

from menu.domain.SelectedRecipe import SelectedRecipe
from menu.domain.ShoppingList import ShoppingItem, ShoppingList
from menu.utilities.constants import (
    INGREDIENT_CATEGORY_KEYWORDS, SHOPPING_CATEGORIES, SHOPPING_TIPS,
    VEGETABLE, MEAT, SEAFOOD, OTHER, DEFAULT_UNIT,
)
from menu.utilities.rounding import round_half_up

logger = logging.getLogger(__name__)

KeywordTable = Sequence[Tuple[str, Sequence[str]]]


def collation_key(name: str) -> Tuple[str, str]:
    """Sort key for ingredient names: accents stripped, case-folded, original as tie-breaker."""
    s = unicodedata.normalize("NFKD", name or "")
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    return (s.casefold(), name or "")


def categorize_ingredient(name: str, keyword_table: KeywordTable = INGREDIENT_CATEGORY_KEYWORDS) -> str:
    """First table whose keyword is a substring of the name wins; otherwise 'other'."""
    n = (name or "").lower()
    for category, keywords in keyword_table:
        for keyword in keywords:
            if keyword in n:
                return category
    return OTHER


def shopping_tips(categories: Dict[str, List[ShoppingItem]]) -> Tuple[str, ...]:
    tips: List[str] = []
    for cat in (VEGETABLE, MEAT, SEAFOOD):
        if categories.get(cat):
            tips.append(SHOPPING_TIPS[cat])
    if any(categories.get(cat) for cat in SHOPPING_CATEGORIES):
        tips.append(SHOPPING_TIPS["by_category"])
    return tuple(tips) if tips else (SHOPPING_TIPS["default"],)


def build_shopping_list(selection: Sequence[SelectedRecipe], party_size: int, *,
                        keyword_table: KeywordTable = INGREDIENT_CATEGORY_KEYWORDS,
                        sort_key: Callable[[str], object] = collation_key) -> ShoppingList:
    """Merge scaled ingredients (and seasonings) across the selection.

    Same-named entries are summed and keep the unit of their first occurrence.
    Units are not converted; a name seen with differing units is summed anyway
    and reported in ``unit_conflicts``.

    Returns:
        ShoppingList with all six categories (possibly empty), each sorted by
        ``sort_key``; total_items equals the number of distinct names.
    """
    required: Dict[str, Dict] = OrderedDict()
    conflicts: List[str] = []

    for sr in selection:
        for ing in sr.all_scaled():
            name = ing.name
            if not name:
                continue
            unit = ing.unit or DEFAULT_UNIT
            entry = required.get(name)
            if entry is None:
                entry = required[name] = {"quantity": 0, "unit": unit}
            elif entry["unit"] != unit and name not in conflicts:
                conflicts.append(name)
                logger.warning("Ingredient '%s' appears with units '%s' and '%s'; summed without conversion",
                               name, entry["unit"], unit)
            entry["quantity"] += ing.quantity

    categories: Dict[str, List[ShoppingItem]] = {cat: [] for cat in SHOPPING_CATEGORIES}
    for name, data in required.items():
        category = categorize_ingredient(name, keyword_table)
        categories.setdefault(category, []).append(ShoppingItem(
            name=name,
            quantity=round_half_up(data["quantity"], 2),
            unit=data["unit"],
            category=category,
        ))

    for items in categories.values():
        items.sort(key=lambda item: sort_key(item.name))

    return ShoppingList(
        party_size=party_size,
        categories={cat: tuple(items) for cat, items in categories.items()},
        total_items=len(required),
        category_counts={cat: len(items) for cat, items in categories.items() if items},
        tips=shopping_tips(categories),
        unit_conflicts=tuple(conflicts),
    )


__all__ = ['build_shopping_list', 'categorize_ingredient', 'collation_key', 'shopping_tips']
