from menu.utilities.config import DATA_DIR, RECIPES_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = DATA_DIR.resolve()
RECIPES_FILE = RECIPES_FILE.resolve()

__all__ = ['DATA_DIR', 'RECIPES_FILE']
