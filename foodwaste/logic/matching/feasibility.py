"""Recipe feasibility matching.

Given a snapshot of fridge groceries, decide which recipes can be prepared.
Quantities are summed per normalized name before matching, so an ingredient
spread over several lots (e.g. milk with two expiry dates) counts in full.
"""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe
from foodwaste.utilities.constants import QUANTITY_TOLERANCE
from foodwaste.utilities.naming import normalize_name

__all__ = ["build_availability", "get_possible_recipes", "times_possible", "summarize_possible_recipes"]


def build_availability(groceries: Iterable[Grocery], include_expired: bool,
                       today: Optional[date] = None) -> Dict[str, float]:
    """Total available quantity per normalized name.

    Expired lots are left out unless ``include_expired`` is set.
    """
    today = today or date.today()
    availability: Dict[str, float] = {}
    for grocery in groceries:
        if not include_expired and grocery.is_expired(today):
            continue
        key = normalize_name(grocery.name)
        availability[key] = availability.get(key, 0) + grocery.quantity
    return availability


def get_possible_recipes(groceries: Iterable[Grocery], include_expired: bool,
                         recipes: Iterable[Recipe], today: Optional[date] = None) -> List[Recipe]:
    """Recipes whose every requirement is met, in the order they were given.

    A recipe without ingredients is always possible.
    """
    availability = build_availability(groceries, include_expired, today)
    return [recipe for recipe in recipes if recipe.check_ingredients(availability)]


def times_possible(recipe: Recipe, availability: Dict[str, float]) -> int:
    """How many times the recipe could be prepared back to back.

    Requirements of zero are ignored; 0 when infeasible or nothing is required.
    """
    times = None
    for name, required in recipe.requirements().items():
        if required <= 0:
            continue
        have = availability.get(name, 0) + QUANTITY_TOLERANCE
        if have < required:
            return 0
        possible_here = int(have // required)
        times = possible_here if times is None else min(times, possible_here)
    return times if times is not None else 0


def summarize_possible_recipes(groceries: Iterable[Grocery], include_expired: bool,
                               recipes: Iterable[Recipe], today: Optional[date] = None) -> List[Dict[str, Any]]:
    availability = build_availability(groceries, include_expired, today)
    return [
        {
            "name": recipe.name,
            "serves": recipe.serves,
            "times_possible": times_possible(recipe, availability),
        }
        for recipe in recipes
        if recipe.check_ingredients(availability)
    ]
