"""Event bus for the notices a menu recommendation can raise.

Published by the API layer after the engine returns (the engine itself never
publishes). Event names and payloads:
  menu.under_supply -> {"categories": [str], "targets": {category: int}, "picked": {category: int}}
  menu.filters_relaxed -> {"request": str}   (request fingerprint)
  recipe.data_error -> {"recipe_id": str, "recipe_name": str, "reason": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from threading import Lock
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

MENU_UNDER_SUPPLY = "menu.under_supply"
MENU_FILTERS_RELAXED = "menu.filters_relaxed"
RECIPE_DATA_ERROR = "recipe.data_error"
MENU_EVENTS = (MENU_UNDER_SUPPLY, MENU_FILTERS_RELAXED, RECIPE_DATA_ERROR)

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._lock = Lock()
		self._listeners: Dict[str, List[Listener]] = defaultdict(list)

	def subscribe(self, event_name: str, listener: Listener) -> None:
		with self._lock:
			if listener not in self._listeners[event_name]:
				self._listeners[event_name].append(listener)

	def unsubscribe(self, event_name: str, listener: Listener) -> None:
		with self._lock:
			if listener in self._listeners.get(event_name, []):
				self._listeners[event_name].remove(listener)

	def listener_count(self, event_name: str) -> int:
		with self._lock:
			return len(self._listeners.get(event_name, []))

	def publish(self, event_name: str, payload: Any) -> None:
		with self._lock:
			listeners = list(self._listeners.get(event_name, []))
		for listener in listeners:
			try:
				listener(event_name, payload)
			except Exception:  # pragma: no cover
				logger.exception("Listener %r failed on %s", listener, event_name)


GLOBAL_EVENT_BUS = EventBus()


def log_listener(event_name: str, payload: Any):
	"""Echo every menu notice to the log; attached when DEBUG is on."""
	logger.info("[EVENT] %s: %s", event_name, payload)


def create_event(event_name: str, payload: Any = None) -> None:
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event', 'log_listener', 'Listener',
	'MENU_UNDER_SUPPLY', 'MENU_FILTERS_RELAXED', 'RECIPE_DATA_ERROR', 'MENU_EVENTS',
]
