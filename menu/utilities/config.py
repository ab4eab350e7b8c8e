"""Configuration management for the Menu Recommender application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Recommendation defaults
DEFAULT_PARTY_SIZE: Final[int] = int(os.getenv('DEFAULT_PARTY_SIZE', '6'))

# Response cache (recommendations are cached per request fingerprint + seed)
MENU_CACHE_TTL: Final[int] = int(os.getenv('MENU_CACHE_TTL', '300'))
MENU_CACHE_MAX_ENTRIES: Final[int] = int(os.getenv('MENU_CACHE_MAX_ENTRIES', '256'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
RECIPES_FILE: Final[Path] = Path(os.getenv('MENU_RECIPES_FILE', str(DATA_DIR / 'recipes.json')))
