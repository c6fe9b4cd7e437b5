"""Smoothie builder: blend fridge groceries into a smoothie and record it as a recipe."""
from __future__ import annotations
import logging
from datetime import date, timedelta
from typing import List, Mapping, Optional

from foodwaste.domain.Fridge import Fridge
from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.RecipeBook import RecipeBook
from foodwaste.domain.Smoothie import Smoothie
from foodwaste.utilities.constants import QUANTITY_TOLERANCE, SMOOTHIE_PROCEDURE, SMOOTHIE_SHELF_LIFE_DAYS
from foodwaste.utilities.naming import normalize_name

__all__ = ["smoothie_name", "take_portion", "create_smoothie"]

logger = logging.getLogger(__name__)


def smoothie_name(name: str) -> str:
    """Append ' Smoothie' unless the name already says so."""
    name = name.strip()
    if "smoothie" not in name.lower():
        name += " Smoothie"
    return name


def take_portion(lots: List[Grocery], quantity: float) -> List[Grocery]:
    """Slices of ``lots`` (oldest first) that together make up ``quantity``.

    Mirrors the fridge's FIFO depletion without mutating anything.
    """
    portion: List[Grocery] = []
    remaining = quantity
    for lot in lots:
        if remaining <= QUANTITY_TOLERANCE:
            break
        take = min(lot.quantity, remaining)
        portion.append(Grocery(lot.name, take, lot.unit, lot.price_per_unit, lot.expiry_date))
        remaining -= take
    return portion


def create_smoothie(fridge: Fridge, recipe_book: RecipeBook, name: str, description: str,
                    portions: Mapping[str, float], today: Optional[date] = None) -> Optional[Smoothie]:
    """Blend ``portions`` (ingredient name -> quantity) out of the fridge.

    All or nothing: when any ingredient is short, the fridge is left untouched and
    None is returned. On success the portions are removed from the fridge and the
    smoothie is added to the recipe book.
    """
    if not portions:
        raise ValueError("A smoothie needs at least one ingredient")
    requested = {}
    for ingredient, quantity in portions.items():
        if quantity is None or not quantity > 0:
            raise ValueError(f"Portion of '{ingredient}' must be positive")
        key = normalize_name(ingredient)
        requested[key] = requested.get(key, 0) + quantity

    short = [k for k, q in requested.items() if fridge.get_total_quantity(k) + QUANTITY_TOLERANCE < q]
    if short:
        logger.info("Cannot blend %s, not enough: %s", name, ", ".join(short))
        return None

    today = today or date.today()
    smoothie = Smoothie(smoothie_name(name), description,
                        today + timedelta(days=SMOOTHIE_SHELF_LIFE_DAYS))
    for key, quantity in requested.items():
        for piece in take_portion(fridge.find_groceries_by_name(key), quantity):
            smoothie.add_ingredient(piece)
        fridge.remove_grocery(key, quantity)

    recipe_book.add_recipe(smoothie.to_recipe(SMOOTHIE_PROCEDURE, 1))
    logger.info("Created %s", smoothie.name)
    return smoothie
