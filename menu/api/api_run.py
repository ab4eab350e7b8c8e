from fastapi import (
    FastAPI,
    Query,
    Depends,
    HTTPException,
)
from pydantic import ValidationError
from datetime import datetime, timezone
from typing import List, Optional
import logging

from menu.domain.MenuBundle import RecipeDiagnostic
from menu.domain.Recipe import Recipe
from menu.events.Event_Bus import GLOBAL_EVENT_BUS, MENU_EVENTS, log_listener
from menu.events.event_helpers import publish_bundle_events
from menu.events.web_observers import start as start_event_observers, get_events as get_web_events
from menu.infra.Menu_Cache import MenuCache
from menu.logic.engine import recommend_menu
from menu.logic.selection.selector import make_rng
from menu.utilities.config import DEBUG, DEFAULT_PARTY_SIZE, MENU_CACHE_TTL, MENU_CACHE_MAX_ENTRIES
from menu.utilities.validators import MenuRequestInput, format_validation_errors

# Routers
from menu.api.routes import recipes as recipe_routes
from menu.api.routes.recipes import load_recipes, load_catalog_diagnostics

# Logging
logger = logging.getLogger("menu_app")

# Initialize FastAPI app
app = FastAPI(title="Smart Menu Recommender API")
app.include_router(recipe_routes.router)

menu_cache = MenuCache(ttl_seconds=MENU_CACHE_TTL, max_entries=MENU_CACHE_MAX_ENTRIES)

# Idempotent; safe on reload
start_event_observers()
if DEBUG:
    for _name in MENU_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(_name, log_listener)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


# -------------------- API: Recommendation --------------------
@app.get('/api/recommend')
def api_recommend(party_size: int = Query(default=DEFAULT_PARTY_SIZE),
                  season: Optional[str] = Query(default=None),
                  preferences: Optional[str] = Query(default=None, description="Comma separated tags"),
                  exclusions: Optional[str] = Query(default=None, description="Comma separated dietary exclusions"),
                  max_minutes: Optional[int] = Query(default=None),
                  max_difficulty: Optional[str] = Query(default=None),
                  seed: Optional[int] = Query(default=None),
                  recipes: List[Recipe] = Depends(load_recipes),
                  catalog_diagnostics: List[RecipeDiagnostic] = Depends(load_catalog_diagnostics)):
    try:
        params = MenuRequestInput(
            party_size=party_size,
            season=season,
            preferences=preferences,
            exclusions=exclusions,
            max_minutes=max_minutes,
            max_difficulty=max_difficulty,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=format_validation_errors(e))
    request = params.to_request()

    cache_key = f"{request.fingerprint()}|seed={seed if seed is not None else '-'}"
    cached = menu_cache.get(cache_key)
    if cached is not None:
        return {**cached, "cached": True}

    used_seed = seed if seed is not None else make_rng().randrange(2 ** 32)
    bundle = recommend_menu(recipes, request, seed=used_seed, catalog_diagnostics=catalog_diagnostics)
    publish_bundle_events(bundle, request)
    logger.info("Recommended %d dishes for %s (seed=%s)", len(bundle.selected()), request.fingerprint(), used_seed)

    body = {
        "success": True,
        "params": request.to_dict(),
        "seed": used_seed,
        "generated_at": _now_iso(),
        **bundle.to_dict(),
    }
    menu_cache.put(cache_key, body)
    return {**body, "cached": False}


# -------------------- API: Events --------------------
@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None)):
    """Recent menu notices (under-supplied categories, relaxed filters, skipped recipes)."""
    return get_web_events(since)
