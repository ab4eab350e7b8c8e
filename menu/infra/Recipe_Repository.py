import json
import logging
from pathlib import Path
from typing import List, NamedTuple, Optional

from menu.domain.MenuBundle import RecipeDiagnostic
from menu.domain.Recipe import Recipe
from menu.domain.errors import DataError
from menu.infra.paths import RECIPES_FILE

logger = logging.getLogger(__name__)


class Catalog(NamedTuple):
    recipes: List[Recipe]
    diagnostics: List[RecipeDiagnostic]


def load_raw_recipes(path: Optional[Path] = None) -> list:
    """Raw catalog entries as stored on disk."""
    with open(path or RECIPES_FILE, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get('recipes', [])
    return data if isinstance(data, list) else []


def read_catalog(path: Optional[Path] = None) -> Catalog:
    """Read the recipe catalog with proper error handling.

    Entries whose labels cannot be parsed are logged, skipped and returned as
    diagnostics; a missing or unreadable file yields an empty catalog.
    """
    source = path or RECIPES_FILE
    try:
        entries = load_raw_recipes(source)
    except FileNotFoundError:
        logger.warning(f"Recipes file not found: {source}. Returning empty list.")
        return Catalog([], [])
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in recipes file: {e}")
        return Catalog([], [])

    recipes: List[Recipe] = []
    diagnostics: List[RecipeDiagnostic] = []
    for entry in entries:
        try:
            recipes.append(Recipe.from_dict(entry))
        except DataError as e:
            logger.warning(f"Skipping catalog entry: {e}")
            name = str(entry.get('name') or e.recipe_id or '') if isinstance(entry, dict) else ''
            diagnostics.append(RecipeDiagnostic(recipe_id=e.recipe_id, recipe_name=name, reason=str(e.args[0])))
    return Catalog(recipes, diagnostics)


def reading_from_recipes(path: Optional[Path] = None) -> List[Recipe]:
    """Parsed recipes only; see read_catalog for the skipped entries."""
    return read_catalog(path).recipes


__all__ = ['Catalog', 'load_raw_recipes', 'read_catalog', 'reading_from_recipes']
