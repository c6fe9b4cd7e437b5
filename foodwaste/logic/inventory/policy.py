"""Grocery lot policies: clubbing (lot equivalence) and value.

Pure functions, no state. The fridge uses ``are_groceries_clubbable`` to decide
whether an incoming lot merges into an existing one.
"""
from __future__ import annotations
from typing import Iterable

from foodwaste.domain.Grocery import Grocery
from foodwaste.utilities.naming import normalize_name

__all__ = ["are_groceries_clubbable", "calculate_value", "total_value", "total_quantity"]


def are_groceries_clubbable(existing: Grocery, new: Grocery) -> bool:
    """Two lots merge iff name, unit, price per unit and expiry date are all equal.

    Units are opaque tags: "liters" and "litres" never club.
    """
    return (
        normalize_name(existing.name) == normalize_name(new.name)
        and existing.unit == new.unit
        and existing.price_per_unit == new.price_per_unit
        and existing.expiry_date == new.expiry_date
    )


def calculate_value(grocery: Grocery) -> float:
    return grocery.quantity * grocery.price_per_unit


def total_value(groceries: Iterable[Grocery]) -> float:
    return sum(calculate_value(g) for g in groceries)


def total_quantity(groceries: Iterable[Grocery]) -> float:
    return sum(g.quantity for g in groceries)
