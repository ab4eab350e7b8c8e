"""Category selector: bucket eligible recipes by dish category and draw a party-size dependent count from each."""
from __future__ import annotations
import logging
import random
import time
from typing import Dict, List, Optional, Sequence

from menu.domain.MenuRequest import MenuRequest
from menu.domain.Recipe import Recipe
from menu.utilities.constants import MAIN, SIDE, SOUP, STAPLE, MENU_CATEGORIES

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Seeded generator; falls back to a time-based seed for production use."""
    return random.Random(time.time_ns() if seed is None else seed)


def selection_targets(party_size: int) -> Dict[str, int]:
    """How many distinct recipes to draw per category for a party of `party_size`."""
    if party_size <= 4:
        sides = 1
    elif party_size <= 8:
        sides = 2
    else:
        sides = 3
    return {
        MAIN: 2 if party_size >= 8 else 1,
        SIDE: sides,
        SOUP: 1,
        STAPLE: 1,
    }


def partition_by_category(recipes: Sequence[Recipe]) -> Dict[str, List[Recipe]]:
    """A recipe tagged with several categories lands in each of those buckets."""
    buckets: Dict[str, List[Recipe]] = {cat: [] for cat in MENU_CATEGORIES}
    for r in recipes:
        for cat in MENU_CATEGORIES:
            if cat in r.categories:
                buckets[cat].append(r)
    return buckets


def select_by_category(filtered: Sequence[Recipe], request: MenuRequest,
                       rng: random.Random) -> Dict[str, List[Recipe]]:
    """Uniform draw without replacement per category; short buckets are taken whole."""
    buckets = partition_by_category(filtered)
    targets = selection_targets(request.party_size)
    selected: Dict[str, List[Recipe]] = {}
    for cat in MENU_CATEGORIES:
        bucket = buckets[cat]
        count = min(targets[cat], len(bucket))
        selected[cat] = rng.sample(bucket, count)
        logger.debug("Category %s: %d eligible, target %d, picked %d", cat, len(bucket), targets[cat], count)
    return selected


__all__ = ["make_rng", "selection_targets", "partition_by_category", "select_by_category"]
