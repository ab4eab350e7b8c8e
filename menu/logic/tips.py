"""Cooking tips derived from the season, the party size and the menu's total time."""
from typing import Dict, List, Sequence, Tuple

from menu.domain.MenuRequest import MenuRequest
from menu.domain.Recipe import Recipe
from menu.utilities.constants import (
    SEASON_TIPS, LARGE_PARTY_SIZE, LARGE_PARTY_TIP, LONG_COOKING_MINUTES, LONG_COOKING_TIP,
)


def cooking_tips(menu: Dict[str, Sequence[Recipe]], request: MenuRequest) -> Tuple[str, ...]:
    tips: List[str] = []
    season_tip = SEASON_TIPS.get(request.season)
    if season_tip:
        tips.append(season_tip)
    if request.party_size >= LARGE_PARTY_SIZE:
        tips.append(LARGE_PARTY_TIP)
    total_minutes = sum(r.total_time_minutes for recipes in menu.values() for r in recipes)
    if total_minutes > LONG_COOKING_MINUTES:
        tips.append(LONG_COOKING_TIP)
    return tuple(tips)


__all__ = ["cooking_tips"]
