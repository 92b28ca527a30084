"""Simple Event Bus / Observer implementation for import and scaling events.

Event names used so far:
  recipe.imported -> payload {"recipe_id": str, "name": str, "ingredients": int, "source": str}
  receipt.parsed  -> payload {"items": int, "supplier": str | None, "source": str}
  recipe.scaled   -> payload {"mode": str, "scaling_factor": float, "new_yield": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
RECIPE_IMPORTED = "recipe.imported"
RECEIPT_PARSED = "receipt.parsed"
RECIPE_SCALED = "recipe.scaled"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def log_listener(event_name: str, payload: Any):
	logger.info("[EVENT] %s: %s", event_name, payload)


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


def start_log_listeners(bus: EventBus = GLOBAL_EVENT_BUS) -> None:
	"""Idempotent: log every known event on the given bus."""
	for name in (RECIPE_IMPORTED, RECEIPT_PARSED, RECIPE_SCALED):
		bus.subscribe(name, log_listener)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'log_listener', 'start_log_listeners',
	'RECIPE_IMPORTED', 'RECEIPT_PARSED', 'RECIPE_SCALED'
]
