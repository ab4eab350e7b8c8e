"""
Input validation schemas using Pydantic: menu requests and uploaded recipes.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from menu.domain.MenuRequest import Difficulty, MenuRequest, current_season, normalize_season
from menu.utilities.constants import PARTY_SIZE_MIN, PARTY_SIZE_MAX, ANY_SEASON


def _split_csv(v):
    """Accept either a list of strings or one comma separated string."""
    if v is None:
        return []
    if isinstance(v, str):
        v = v.split(',')
    return [s.strip().lower() for s in v if s and s.strip()]


class MenuRequestInput(BaseModel):
    """Schema for a menu recommendation request."""
    party_size: int = Field(..., ge=PARTY_SIZE_MIN, le=PARTY_SIZE_MAX)
    season: Optional[str] = None
    preferences: List[str] = Field(default_factory=list)
    exclusions: List[str] = Field(default_factory=list)
    max_minutes: Optional[int] = Field(None, gt=0)
    max_difficulty: Optional[str] = None

    @field_validator('season')
    @classmethod
    def validate_season(cls, v):
        """Blank -> current season; otherwise one of the season names or 'any'."""
        if v is None or not str(v).strip():
            return current_season()
        return normalize_season(v)

    @field_validator('preferences', 'exclusions', mode='before')
    @classmethod
    def split_tags(cls, v):
        return _split_csv(v)

    @field_validator('max_difficulty')
    @classmethod
    def validate_difficulty(cls, v):
        """Blank or 'any' means no ceiling."""
        if v is None or not v.strip() or v.strip().lower() == ANY_SEASON:
            return None
        return Difficulty.parse(v).label

    def to_request(self) -> MenuRequest:
        return MenuRequest(
            party_size=self.party_size,
            season=self.season or current_season(),
            preference_tags=frozenset(self.preferences),
            dietary_exclusions=frozenset(self.exclusions),
            max_total_cook_minutes=self.max_minutes,
            max_difficulty=Difficulty.parse(self.max_difficulty) if self.max_difficulty else None,
        )


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0, le=100000)
    unit: str = Field('', max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class NutritionInput(BaseModel):
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbohydrate: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    fiber: float = Field(0, ge=0)


class RecipeInput(BaseModel):
    """Schema for an uploaded recipe."""
    name: str = Field(..., max_length=50)
    categories: List[str] = Field(..., min_length=1)
    seasons: List[str] = Field(..., min_length=1)
    difficulty: Optional[str] = None
    prep_time_minutes: int = Field(0, ge=0, le=300)
    cook_time_minutes: int = Field(0, ge=0, le=480)
    base_servings: int = Field(..., ge=1, le=20)
    ingredients: List[IngredientInput] = Field(..., min_length=1)
    seasonings: List[IngredientInput] = Field(default_factory=list)
    nutrition_per_base: Optional[NutritionInput] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('seasons')
    @classmethod
    def validate_seasons(cls, v):
        return [normalize_season(s) for s in v]

    @field_validator('difficulty')
    @classmethod
    def validate_difficulty(cls, v):
        return Difficulty.parse(v).label if v else None

    @field_validator('categories', 'tags')
    @classmethod
    def validate_labels(cls, v):
        """Ensure labels are non-empty strings."""
        return [s.strip().lower() for s in v if s and s.strip()]


def format_validation_errors(exc) -> List[str]:
    """Flatten a pydantic ValidationError into 'field: message' strings."""
    messages = []
    for err in exc.errors():
        loc = '.'.join(str(p) for p in err.get('loc', ()))
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get('msg', ''))
    return messages
