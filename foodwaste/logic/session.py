"""Kitchen session: one fridge, one recipe book and the event bus they report to.

Each session is independent, so tests and HTTP apps build their own instead of
sharing module-level state.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from foodwaste.domain.Fridge import Fridge
from foodwaste.domain.Grocery import Grocery
from foodwaste.domain.Recipe import Recipe
from foodwaste.domain.RecipeBook import RecipeBook
from foodwaste.domain.Smoothie import Smoothie
from foodwaste.events.Event_Bus import EventBus
from foodwaste.events.alert_log import AlertLog
from foodwaste.logic.matching.feasibility import summarize_possible_recipes
from foodwaste.logic.pantry.analysis import compute_pantry_snapshots
from foodwaste.logic.shopping.list_builder import build_shopping_list
from foodwaste.logic.smoothies.builder import create_smoothie
from foodwaste.utilities.constants import DAYS_BEFORE_EXPIRY

logger = logging.getLogger(__name__)


class KitchenSession:
    def __init__(self, fridge: Optional[Fridge] = None, recipe_book: Optional[RecipeBook] = None,
                 event_bus: Optional[EventBus] = None, days_before_expiry: int = DAYS_BEFORE_EXPIRY):
        self.event_bus = event_bus if event_bus is not None else EventBus()
        if fridge is None:
            fridge = Fridge(self.event_bus, days_before_expiry)
        self.fridge = fridge.set_event_bus(self.event_bus)
        self.recipe_book = recipe_book if recipe_book is not None else RecipeBook()
        self.days_before_expiry = days_before_expiry
        self.alerts = AlertLog().start(self.event_bus)

    # --- Groceries ----------------------------------------------------------
    def add_grocery(self, grocery: Grocery):
        self.fridge.add_grocery(grocery)

    def remove_grocery(self, name: str, quantity: float) -> bool:
        return self.fridge.remove_grocery(name, quantity)

    def get_all_groceries(self) -> List[Grocery]:
        return self.fridge.get_all_groceries()

    def get_expired_groceries(self, today: Optional[date] = None) -> List[Grocery]:
        return self.fridge.get_expired_groceries(today)

    def get_groceries_sorted_by_name(self) -> List[Grocery]:
        return self.fridge.get_groceries_sorted_by_name()

    def get_groceries_sorted_by_expiry_date(self) -> List[Grocery]:
        return self.fridge.get_groceries_sorted_by_expiry_date()

    def find_groceries_by_name(self, name: str) -> List[Grocery]:
        return self.fridge.find_groceries_by_name(name)

    def calculate_total_value(self) -> float:
        return self.fridge.calculate_total_value()

    def calculate_total_value_of_expired(self, today: Optional[date] = None) -> float:
        return self.fridge.calculate_total_value_of_expired(today)

    def pantry_snapshots(self, window: Optional[int] = None, today: Optional[date] = None):
        window = self.days_before_expiry if window is None else window
        return compute_pantry_snapshots(self.fridge.get_all_groceries(), window=window, today=today)

    # --- Recipes ------------------------------------------------------------
    def add_recipe(self, recipe: Recipe):
        self.recipe_book.add_recipe(recipe)

    def remove_recipe(self, name: str) -> bool:
        return self.recipe_book.remove_recipe(name)

    def get_recipes(self) -> List[Recipe]:
        return self.recipe_book.get_recipes()

    def get_smoothie_recipes(self) -> List[Recipe]:
        return self.recipe_book.get_smoothie_recipes()

    def get_possible_recipes(self, include_expired: bool, today: Optional[date] = None) -> List[Recipe]:
        snapshot = self.fridge.get_all_groceries()
        return self.recipe_book.get_possible_recipes(snapshot, include_expired, today)

    def summarize_possible_recipes(self, include_expired: bool,
                                   today: Optional[date] = None) -> List[Dict[str, Any]]:
        return summarize_possible_recipes(self.fridge.get_all_groceries(), include_expired,
                                          self.recipe_book.get_recipes(), today)

    def create_smoothie(self, name: str, description: str, portions: Mapping[str, float],
                        today: Optional[date] = None) -> Optional[Smoothie]:
        return create_smoothie(self.fridge, self.recipe_book, name, description, portions, today)

    def build_shopping_list(self, recipe_names: Iterable[str], include_expired: bool = False,
                            today: Optional[date] = None):
        """Shopping list for the named recipes; unknown names raise ValueError."""
        recipes = []
        for name in recipe_names:
            recipe = self.recipe_book.find_recipe(name)
            if recipe is None:
                raise ValueError(f"Recipe '{name}' not found")
            recipes.append(recipe)
        return build_shopping_list(recipes, self.fridge.get_all_groceries(), include_expired, today)
