"""Simple Event Bus / Observer implementation for fridge alerts.

Event names used so far:
  fridge.low_stock -> payload {"name": str, "remaining": float, "threshold": float}
  fridge.near_expiry -> payload {"grocery": Grocery, "days_left": int, "threshold": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
FRIDGE_LOW_STOCK = "fridge.low_stock"
FRIDGE_NEAR_EXPIRY = "fridge.near_expiry"


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


__all__ = ['EventBus', 'FRIDGE_LOW_STOCK', 'FRIDGE_NEAR_EXPIRY']
