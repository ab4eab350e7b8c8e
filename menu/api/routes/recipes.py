from collections import Counter
import math
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError

from menu.domain.MenuBundle import RecipeDiagnostic
from menu.domain.Recipe import Recipe
from menu.infra.Recipe_Repository import Catalog, read_catalog
from menu.utilities.constants import MENU_CATEGORIES, SEASONS
from menu.utilities.validators import RecipeInput, format_validation_errors

router = APIRouter(prefix="/api")


def load_catalog() -> Catalog:
    """Catalog dependency, read once per request; tests override it through app.dependency_overrides."""
    return read_catalog()


def load_recipes(catalog: Catalog = Depends(load_catalog)) -> List[Recipe]:
    return catalog.recipes


def load_catalog_diagnostics(catalog: Catalog = Depends(load_catalog)) -> List[RecipeDiagnostic]:
    """Entries skipped while reading the catalog."""
    return catalog.diagnostics


@router.get("/recipes")
def list_recipes(category: Optional[str] = Query(default=None),
                 season: Optional[str] = Query(default=None),
                 keyword: Optional[str] = Query(default=None),
                 page: int = Query(default=1, ge=1),
                 page_size: int = Query(default=20, ge=1, le=100),
                 recipes: List[Recipe] = Depends(load_recipes)):
    """Filter the catalog by category / season / name keyword and paginate."""
    filtered = recipes
    if category:
        c = category.strip().lower()
        filtered = [r for r in filtered if c in r.categories]
    if season:
        s = season.strip().lower()
        filtered = [r for r in filtered if s in r.seasons]
    if keyword:
        k = keyword.strip().lower()
        filtered = [r for r in filtered if k in r.name.lower()]

    total = len(filtered)
    start = (page - 1) * page_size
    return {
        "success": True,
        "data": [r.to_dict() for r in filtered[start:start + page_size]],
        "pagination": {
            "page": page,
            "page_size": page_size,
            "total": total,
            "total_pages": math.ceil(total / page_size),
        },
    }


@router.get("/categories")
def list_categories(recipes: List[Recipe] = Depends(load_recipes)):
    """Catalog counts per dish category, season and difficulty."""
    by_category = Counter(c for r in recipes for c in r.categories)
    by_season = Counter(s for r in recipes for s in r.seasons)
    by_difficulty = Counter(r.difficulty.label for r in recipes if r.difficulty is not None)
    return {
        "success": True,
        "data": {
            "total": len(recipes),
            "categories": {c: by_category.get(c, 0) for c in MENU_CATEGORIES},
            "other_categories": {c: n for c, n in sorted(by_category.items()) if c not in MENU_CATEGORIES},
            "seasons": {s: by_season.get(s, 0) for s in SEASONS},
            "all_seasons": sum(1 for r in recipes if not r.seasons),
            "difficulties": dict(sorted(by_difficulty.items())),
        },
    }


@router.post("/recipes/validate")
def validate_recipe(payload: dict = Body(...)):
    """Check an uploaded recipe against the catalog schema. Nothing is stored."""
    try:
        recipe = RecipeInput.model_validate(payload)
    except ValidationError as e:
        return {"valid": False, "errors": format_validation_errors(e)}
    return {"valid": True, "errors": [], "preview": {"name": recipe.name, "categories": recipe.categories}}
