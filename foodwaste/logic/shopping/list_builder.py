"""Shopping list builder.

Provides build_shopping_list(recipes, groceries, include_expired=False, today=None).
"""
from collections import defaultdict
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe
from foodwaste.logic.matching.feasibility import build_availability
from foodwaste.utilities.constants import QUANTITY_TOLERANCE


def build_shopping_list(recipes: Iterable[Recipe], groceries: Iterable[Grocery],
                        include_expired: bool = False, today: Optional[date] = None):
    """Compute missing ingredients for cooking every recipe in ``recipes`` once.

    Args:
        recipes: Recipes to cook (a recipe listed twice counts twice).
        groceries: Fridge snapshot.
        include_expired: If True, expired lots count as available.
        today: Reference date for expiry, defaults to today.

    Returns:
        Sorted list of dicts: { name, required, have, missing } (only missing > 0).
    """
    required: Dict[str, float] = defaultdict(float)
    for recipe in recipes:
        for name, qty in recipe.requirements().items():
            required[name] += qty

    have_totals = build_availability(groceries, include_expired, today)

    shopping_list: List[Dict[str, Any]] = []
    for name, required_qty in required.items():
        have = have_totals.get(name, 0)
        missing = required_qty - have
        if missing > QUANTITY_TOLERANCE:
            shopping_list.append({
                'name': name,
                'required': required_qty,
                'have': have,
                'missing': missing
            })

    shopping_list.sort(key=lambda x: x['name'])
    return shopping_list

__all__ = ['build_shopping_list']
