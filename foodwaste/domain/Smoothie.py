"""Smoothie domain entity: a blend of grocery portions that can be stored as a recipe."""
from datetime import date, datetime
from typing import Dict, List

from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe
from foodwaste.logic.inventory.policy import total_value
from foodwaste.utilities.constants import CURRENCY, DATE_FORMAT, SMOOTHIE_PROCEDURE
from foodwaste.utilities.naming import normalize_name


class Smoothie:
    def __init__(self, name: str, description: str, expiry_date: date):
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Smoothie name cannot be null or empty")
        if expiry_date is None:
            raise ValueError("Expiry date cannot be null")
        if isinstance(expiry_date, datetime):
            expiry_date = expiry_date.date()
        self.name = name.strip()
        self.description = description or ""
        self.expiry_date = expiry_date
        self._ingredients: List[Grocery] = []

    @property
    def ingredients(self) -> List[Grocery]:
        return [g.copy() for g in self._ingredients]

    def add_ingredient(self, grocery: Grocery):
        if not isinstance(grocery, Grocery):
            raise ValueError("Ingredient must be a Grocery")
        self._ingredients.append(grocery.copy())

    def calculate_total_price(self) -> float:
        return total_value(self._ingredients)

    def get_ingredients_map(self) -> Dict[str, float]:
        '''Ingredient quantities summed per normalized name, for recipe storage.'''
        result: Dict[str, float] = {}
        for g in self._ingredients:
            key = normalize_name(g.name)
            result[key] = result.get(key, 0) + g.quantity
        return result

    def to_recipe(self, procedure: str = SMOOTHIE_PROCEDURE, serves: int = 1) -> Recipe:
        return Recipe(self.name, self.description, procedure, self.get_ingredients_map(), serves)

    def __str__(self) -> str:
        lines = [
            f"Smoothie: {self.name}",
            f"Expiry date: {self.expiry_date.strftime(DATE_FORMAT)}",
            "Ingredients:",
        ]
        lines.extend(str(g) for g in self._ingredients)
        lines.append(f"Total Price: {CURRENCY} {self.calculate_total_price():.2f}")
        return "\n".join(lines)

    __repr__ = __str__
