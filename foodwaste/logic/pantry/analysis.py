"""Fridge analysis helpers: expiring-soon and low-stock snapshots."""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.utilities.constants import DATE_FORMAT, DAYS_BEFORE_EXPIRY, LOW_STOCK_THRESHOLD

__all__ = ["compute_expiring_soon", "compute_low_stock", "compute_pantry_snapshots"]


def compute_expiring_soon(groceries: Iterable[Grocery], *, window: Optional[int] = None,
                          today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Return lots expiring in <= window days (including already expired)."""
    expiring_window = window if window is not None else DAYS_BEFORE_EXPIRY
    today = today or date.today()
    result: List[Dict[str, Any]] = []
    for g in groceries:
        days_left = (g.expiry_date - today).days
        if days_left <= expiring_window:
            result.append({
                'name': g.name,
                'quantity': g.quantity,
                'unit': g.unit,
                'exp': g.expiry_date.strftime(DATE_FORMAT),
                'days_left': days_left,
                'value': g.value(),
            })
    result.sort(key=lambda x: (x['days_left'], x['name']))
    return result


def compute_low_stock(groceries: Iterable[Grocery]) -> List[Dict[str, Any]]:
    """Return per (name, unit) totals at or below the LOW_STOCK_THRESHOLD for their unit."""
    totals: Dict[tuple, float] = {}
    for g in groceries:
        key = (g.name, g.unit)
        totals[key] = totals.get(key, 0) + g.quantity
    low: List[Dict[str, Any]] = []
    for (name, unit), q in totals.items():
        th = LOW_STOCK_THRESHOLD.get(unit, 0)
        if th > 0 and q <= th:
            low.append({
                'name': name,
                'quantity': q,
                'unit': unit,
                'threshold': th,
            })
    low.sort(key=lambda x: (x['quantity'], x['name']))
    return low


def compute_pantry_snapshots(groceries: Iterable[Grocery], *, window: Optional[int] = None,
                             today: Optional[date] = None):
    """Return (expiring_soon, low_stock) computed over the same snapshot."""
    snapshot = list(groceries)
    return (compute_expiring_soon(snapshot, window=window, today=today),
            compute_low_stock(snapshot))
