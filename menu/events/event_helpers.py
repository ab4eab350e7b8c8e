"""Event helper utilities.

Publishing helpers for the notices a recommendation can raise, using the
global event bus. The API layer calls publish_bundle_events() once the pure
engine has returned.

Quick import:
    from menu.events.event_helpers import (
        publish_under_supply, publish_filters_relaxed, publish_data_error,
        publish_bundle_events
    )
"""
from __future__ import annotations
from typing import Dict, Iterable

from menu.domain.MenuBundle import MenuBundle
from menu.domain.MenuRequest import MenuRequest
from menu.logic.selection.selector import selection_targets
from .Event_Bus import (
    create_event,
    MENU_UNDER_SUPPLY, MENU_FILTERS_RELAXED, RECIPE_DATA_ERROR,
)

__all__ = [
    'publish_under_supply', 'publish_filters_relaxed', 'publish_data_error', 'publish_bundle_events',
    'MENU_UNDER_SUPPLY', 'MENU_FILTERS_RELAXED', 'RECIPE_DATA_ERROR',
]


def publish_under_supply(categories: Iterable[str], targets: Dict[str, int], picked: Dict[str, int]):
    """Publish a menu.under_supply event."""
    create_event(MENU_UNDER_SUPPLY, {
        'categories': list(categories),
        'targets': targets,
        'picked': picked,
    })


def publish_filters_relaxed(request: MenuRequest):
    """Publish a menu.filters_relaxed event."""
    create_event(MENU_FILTERS_RELAXED, {'request': request.fingerprint()})


def publish_data_error(recipe_id, recipe_name: str, reason: str):
    """Publish a recipe.data_error event."""
    create_event(RECIPE_DATA_ERROR, {
        'recipe_id': recipe_id,
        'recipe_name': recipe_name,
        'reason': reason,
    })


def publish_bundle_events(bundle: MenuBundle, request: MenuRequest):
    if bundle.relaxed:
        publish_filters_relaxed(request)
    for d in bundle.diagnostics:
        publish_data_error(d.recipe_id, d.recipe_name, d.reason)
    if bundle.under_supplied:
        targets = selection_targets(request.party_size)
        publish_under_supply(
            bundle.under_supplied,
            {cat: targets[cat] for cat in bundle.under_supplied},
            {cat: len(bundle.menu.get(cat, ())) for cat in bundle.under_supplied},
        )
