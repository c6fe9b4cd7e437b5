"""Web-facing record of fridge events.

An AlertLog subscribes to an EventBus for:
  - fridge.low_stock
  - fridge.near_expiry

and keeps a bounded in-memory ring buffer of recent events that the HTTP layer
can poll. Each event carries an auto-increment id (cursor) so clients can ask
only for newer events (since=<last_id_seen>).
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from .Event_Bus import FRIDGE_LOW_STOCK, FRIDGE_NEAR_EXPIRY

logger = logging.getLogger(__name__)

MAX_EVENTS = 300


class AlertLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._max_events = max_events
        self._bus = None

    def record(self, event_name: str, payload: Any):
        """EventBus callback."""
        evt: Dict[str, Any] = {
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            grocery = payload.get('grocery')
            if grocery is not None:
                evt['name'] = grocery.name
                evt['unit'] = grocery.unit
                evt['quantity'] = grocery.quantity
            for k in ('name', 'remaining', 'threshold', 'days_left'):
                if k in payload and k not in evt:
                    evt[k] = payload[k]
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            if len(self._events) > self._max_events:
                del self._events[: len(self._events) - self._max_events]
        logger.debug("Recorded %s event %s", event_name, evt.get('name'))

    def start(self, bus):
        """Idempotent: subscribe to ``bus`` once."""
        if self._bus is bus:
            return self
        if self._bus is not None:
            self.stop()
        bus.subscribe(FRIDGE_LOW_STOCK, self.record)
        bus.subscribe(FRIDGE_NEAR_EXPIRY, self.record)
        self._bus = bus
        return self

    def stop(self):
        if self._bus is None:
            return
        self._bus.unsubscribe(FRIDGE_LOW_STOCK, self.record)
        self._bus.unsubscribe(FRIDGE_NEAR_EXPIRY, self.record)
        self._bus = None

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive), plus next_cursor for polling."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['AlertLog', 'MAX_EVENTS']
