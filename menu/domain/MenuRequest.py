"""MenuRequest value and the ordinal/season vocabularies it uses."""
from dataclasses import dataclass, replace
from datetime import date
from enum import IntEnum
from typing import FrozenSet, Optional

from menu.utilities.constants import ANY_SEASON, SEASONS


class Difficulty(IntEnum):
    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3

    @classmethod
    def parse(cls, value) -> "Difficulty":
        '''Accepts a Difficulty, its int value or its name (case-insensitive).'''
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None

    @property
    def label(self) -> str:
        return self.name.lower()


def current_season(today: Optional[date] = None) -> str:
    month = (today or date.today()).month
    if 3 <= month <= 5:
        return "spring"
    if 6 <= month <= 8:
        return "summer"
    if 9 <= month <= 11:
        return "autumn"
    return "winter"


def normalize_season(value) -> str:
    s = str(value or "").strip().lower()
    if s == "fall":
        s = "autumn"
    if s != ANY_SEASON and s not in SEASONS:
        raise ValueError(f"Unknown season: {value!r}")
    return s


@dataclass(frozen=True)
class MenuRequest:
    party_size: int
    season: str = ANY_SEASON
    preference_tags: FrozenSet[str] = frozenset()
    dietary_exclusions: FrozenSet[str] = frozenset()
    max_total_cook_minutes: Optional[int] = None
    max_difficulty: Optional[Difficulty] = None

    def without_difficulty_ceiling(self) -> "MenuRequest":
        return replace(self, max_difficulty=None)

    def fingerprint(self) -> str:
        '''Stable textual key over every field (order-independent for the tag sets).'''
        return "|".join([
            f"party={self.party_size}",
            f"season={self.season}",
            "prefs=" + ",".join(sorted(self.preference_tags)),
            "excl=" + ",".join(sorted(self.dietary_exclusions)),
            f"minutes={self.max_total_cook_minutes if self.max_total_cook_minutes is not None else '-'}",
            f"difficulty={self.max_difficulty.label if self.max_difficulty is not None else '-'}",
        ])

    def to_dict(self):
        return {
            "party_size": self.party_size,
            "season": self.season,
            "preference_tags": sorted(self.preference_tags),
            "dietary_exclusions": sorted(self.dietary_exclusions),
            "max_total_cook_minutes": self.max_total_cook_minutes,
            "max_difficulty": self.max_difficulty.label if self.max_difficulty is not None else None,
        }


__all__ = ["Difficulty", "MenuRequest", "current_season", "normalize_season"]
